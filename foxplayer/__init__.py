"""Entities, local key/value storage, playback state, an MPRIS player model and key bindings for a terminal music player."""

__version__ = "0.1.0"