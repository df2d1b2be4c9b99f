"""A terminal VoIP dialer front end: screens, settings and a call-screen state machine."""

__version__ = "0.1.0"