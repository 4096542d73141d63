"""Well-known element content types.

Templates switch on these values; callers may use any other string as well.
"""

LINK = "link"
MENU = "menu"
IMAGE = "image"
SEPARATOR = "separator"

INPUT_BUTTON = "button_input"
INPUT_CHECKBOX = "checkbox_input"
INPUT_COLOR = "color_input"
INPUT_DATE = "date_input"
INPUT_DATETIME_LOCAL = "datetimeloc_input"
INPUT_EMAIL = "email_input"
INPUT_FILE = "file_input"
INPUT_HIDDEN = "hidden_input"
INPUT_IMAGE = "image_input"
INPUT_MONTH = "month_input"
INPUT_NUMBER = "number_input"
INPUT_PASSWORD = "password_input"
INPUT_RADIO = "radio_input"
INPUT_RANGE = "range_input"
INPUT_RESET = "reset_input"
INPUT_SEARCH = "search_input"
INPUT_SUBMIT = "submit_input"
INPUT_TEL = "tel_input"
INPUT_TEXT = "text_input"
INPUT_TIME = "time_input"
INPUT_URL = "url_input"
INPUT_WEEK = "week_input"

INPUT_SUFFIX = "_input"


def is_input(content_type: str) -> bool:
    """Return True for the ``*_input`` family of content types."""

    return content_type.endswith(INPUT_SUFFIX)


def input_html_type(content_type: str) -> str:
    """Map an input content type to the HTML ``type`` attribute value."""

    if content_type == INPUT_DATETIME_LOCAL:
        return "datetime-local"
    if is_input(content_type):
        return content_type[: -len(INPUT_SUFFIX)]
    return "text"
