"""Request, server and response records used by the client."""

from __future__ import annotations

from dataclasses import dataclass, field

from .jsonobject import JsonObject

DEFAULT_DOMAIN = "prod3.eagle3dstreaming.com"


@dataclass
class ServerRequest:
    """A request to start a new dedicated server."""

    api_key: str = ""
    domain: str = DEFAULT_DOMAIN
    server_app_name: str = ""
    server_map_name: str = ""
    max_player: int = 1


@dataclass
class ServerListRequest:
    """A request for the list of running dedicated servers."""

    api_key: str = ""
    domain: str = DEFAULT_DOMAIN
    server_app_name: str = ""


@dataclass
class ServerInfo:
    """What is known about one dedicated server."""

    server_app_name: str = ""
    server_map_name: str = "No Valid Map Name"
    ip_address: str = "0.0.0.0"
    port: int = 0
    current_player: int = 0
    max_player: int = 0


@dataclass
class ErrorHandle:
    """The error state of a response."""

    has_error: bool = False
    error_code: int = 0
    error_message: str = ""

    def decode_error(self, response_data: JsonObject | None) -> None:
        """Take the error out of a response body, if it carries one."""
        if response_data is None or not response_data.has_field("error"):
            return
        self.has_error = True
        self.error_code = response_data.get_integer_field("status")
        self.error_message = response_data.get_string_field("error")


@dataclass
class Response:
    """A decoded response together with its error state."""

    response_object: JsonObject | None = None
    response_error: ErrorHandle = field(default_factory=ErrorHandle)