"""
Transport adapters: where announcements go and where commands come from.
"""

from .channel import Channel, ConsoleChannel, RecordingChannel

__all__ = ['Channel', 'ConsoleChannel', 'RecordingChannel']
