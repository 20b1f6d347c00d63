"""Static translation tables for HTTP status codes."""

from __future__ import annotations

STATUS_TEXT: dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

STATUS_CLASS: dict[int, str] = {
    1: "Informational",
    2: "Success",
    3: "Redirection",
    4: "Client Error",
    5: "Server Error",
}

STATUS_CLASS_TEXT: dict[int, str] = {
    1: "The request was received, continuing process",
    2: "The request was successfully received, understood, and accepted",
    3: "Further action needs to be taken in order to complete the request",
    4: "The request contains bad syntax or cannot be fulfilled",
    5: "The server failed to fulfill an apparently valid request",
}

STATUS_CLASS_DESCRIPTION: dict[int, str] = {
    1: (
        "An informational response indicates that the request was received and understood. "
        "It is issued on a provisional basis while request processing continues. "
        "It alerts the client to wait for a final response. The message consists only of the "
        "status line and optional header fields, and is terminated by an empty line. "
        "As the HTTP/1.0 standard did not define any 1xx status codes, servers must not send a "
        "1xx response to an HTTP/1.0 compliant client except under experimental conditions."
    ),
    2: (
        "This class of status codes indicates the action requested by the client was received, "
        "understood, and accepted."
    ),
    3: (
        "Further action needs to be taken in order to complete the request. "
        "This class of status code indicates a provisional response, consisting only of the "
        "Status-Line and optional headers, and is terminated by an empty line. Since HTTP/1.0 "
        "did not define any 1xx status codes, servers must not send a 1xx response to an "
        "HTTP/1.0 compliant client except under experimental conditions."
    ),
    4: (
        "The 4xx class of status code is intended for cases in which the client seems to have erred. "
        "Except when responding to a HEAD request, the server should include an entity containing "
        "an explanation of the error situation, and whether it is a temporary or permanent condition. "
        "These status codes are applicable to any request method. User agents should display any "
        "included entity to the user."
    ),
    5: (
        'Response status codes beginning with the digit "5" indicate cases in which the server is '
        "aware that it has encountered an error or is otherwise incapable of performing the request. "
        "Except when responding to a HEAD request, the server should include an entity containing an "
        "explanation of the error situation, and indicate whether it is a temporary or permanent "
        "condition. Likewise, user agents should display any included entity to the user. These "
        "response codes are applicable to any request method."
    ),
}

STATUS_CLASS_COLOR: dict[int, str] = {
    1: "info",
    2: "success",
    3: "warning",
    4: "danger",
    5: "danger",
}

STATUS_CLASS_ICON: dict[int, str] = {
    1: "info-circle",
    2: "check-circle",
    3: "exclamation-triangle",
    4: "exclamation-circle",
    5: "exclamation-circle",
}


def _class_digit(status_code: int) -> int | None:
    """Return the leading digit of a three-digit status code."""
    if not 100 <= status_code <= 999:
        return None
    return status_code // 100


def status_text(status_code: int) -> str:
    return STATUS_TEXT.get(status_code, "Unknown Response Code")


def status_class(status_code: int) -> str:
    return STATUS_CLASS.get(_class_digit(status_code), "Unknown Response Code Class")


def status_class_text(status_code: int) -> str:
    return STATUS_CLASS_TEXT.get(_class_digit(status_code), "Unknown Response Code Class Text")


def status_class_description(status_code: int) -> str:
    return STATUS_CLASS_DESCRIPTION.get(
        _class_digit(status_code), "Unknown Response Code Class Description"
    )


def status_class_color(status_code: int) -> str:
    return STATUS_CLASS_COLOR.get(_class_digit(status_code), "secondary")


def status_class_icon(status_code: int) -> str:
    return STATUS_CLASS_ICON.get(_class_digit(status_code), "question-circle")
