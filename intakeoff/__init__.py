"""IntakeOff: healthcare intake prompts, API client and settings."""

__version__ = "0.1.0"
