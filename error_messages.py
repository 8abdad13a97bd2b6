# error_messages.py
"""
User-friendly error messages with recovery suggestions for the calendar application.
Provides consistent, actionable error communication across the application.
"""

class ErrorMessages:
    """Centralized error message definitions with user-friendly language and recovery suggestions."""

    # Day View Layout Errors
    INVALID_EVENT_RANGE = {
        'title': 'Invalid Event Time',
        'message': 'An event ends before it starts and cannot be placed on the day view.',
        'suggestions': [
            'Open the event and check its start and end times',
            'Refresh calendar data if the event was edited elsewhere'
        ],
        'code': 'LAYOUT_001'
    }

    INVALID_DAY_WINDOW = {
        'title': 'Invalid Day Range',
        'message': 'The day being displayed has an invalid start or end time.',
        'suggestions': [
            'Navigate to another day and back',
            'Check the timezone configured in settings'
        ],
        'code': 'LAYOUT_002'
    }

    INVALID_LAYOUT_MODE = {
        'title': 'Invalid Layout Option',
        'message': 'The day view column mode in settings is not recognized.',
        'suggestions': [
            'Choose "global" or "cluster" as the column mode',
            'Remove the option from settings to use the default'
        ],
        'code': 'LAYOUT_003'
    }

    # Event Data Errors
    EVENT_PARSE_ERROR = {
        'title': 'Event Data Error',
        'message': 'An event could not be read because its date or time is malformed.',
        'suggestions': [
            'Check the event in its source calendar',
            'Try refreshing calendar data'
        ],
        'code': 'EVENT_001'
    }

    # Configuration Errors
    SETTINGS_ERROR = {
        'title': 'Settings Error',
        'message': 'Unable to save or load application settings.',
        'suggestions': [
            'Check file permissions in application folder',
            'Settings will use default values'
        ],
        'code': 'CONFIG_001'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error has occurred.',
        'suggestions': [
            'Try the operation again',
            'Restart the application if problem persists',
            'Report this issue to support with error details'
        ],
        'code': 'APP_002'
    }

    @staticmethod
    def get_message(error_type):
        """
        Get error message details by error type.

        Args:
            error_type (str): The error type constant name

        Returns:
            dict: Error message details with title, message, suggestions, and code
        """
        return getattr(ErrorMessages, error_type, ErrorMessages.UNEXPECTED_ERROR)

    @staticmethod
    def format_suggestions(suggestions):
        """
        Format suggestion list for display.

        Args:
            suggestions (list): List of suggestion strings

        Returns:
            str: Formatted suggestions string
        """
        if not suggestions:
            return ""

        if len(suggestions) == 1:
            return f"Suggestion: {suggestions[0]}"

        formatted = "Suggestions:\n"
        for i, suggestion in enumerate(suggestions, 1):
            formatted += f"{i}. {suggestion}\n"

        return formatted.strip()


class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

    @classmethod
    def from_catalog(cls, error_type, detail=None):
        """Build the exception from an ErrorMessages entry, appending detail to the message."""
        info = ErrorMessages.get_message(error_type)
        message = info['message']
        if detail:
            message = f"{message} ({detail})"
        return cls(message, error_code=info['code'], suggestions=list(info['suggestions']))


class LayoutError(CalendarError):
    """Exception for day view layout errors."""
    pass


class InvalidEventRangeError(LayoutError):
    """An event's end precedes its start."""
    pass


class InvalidDayWindowError(LayoutError):
    """The day window is empty or reversed."""
    pass


class LayoutConfigurationError(LayoutError):
    """Unknown layout option such as an unsupported column mode."""
    pass


class EventParseError(CalendarError):
    """Exception for malformed event payloads."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration errors."""
    pass
