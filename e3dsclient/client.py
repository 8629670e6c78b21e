"""Client for the dedicated-server management service."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from typing import Callable

from .decoder import decode_requested_new_server_info, decode_server_list
from .jsonobject import JsonObject
from .models import ErrorHandle, Response, ServerInfo, ServerListRequest, ServerRequest

logger = logging.getLogger("e3dsclient")

START_SERVER_URL = "https://agw.eaglepixelstreaming.com/api/v3/ss/startServerApp"
SERVER_LIST_URL = "https://agw.eaglepixelstreaming.com/api/v3/ss/dslist/"
LATEST_SERVER_LIST_URL = "https://agw.eaglepixelstreaming.com/api/v3/ss/dslistOflatestverison/"

Transport = Callable[[str, dict, str], "tuple[int, str]"]
FailureCallback = Callable[[ErrorHandle, bool], None]
NewServerCallback = Callable[[ServerInfo, bool], None]
ServerListCallback = Callable[[list, bool], None]
ResponseListener = Callable[[Response, bool], None]


def urllib_transport(url: str, headers: dict, body: str) -> tuple[int, str]:
    """POST ``body`` to ``url``; return the status and text of the reply.

    Raises OSError when the server cannot be reached.
    """
    request = urllib.request.Request(url, data=body.encode("utf-8"), headers=headers, method="POST")
    try:
        with urllib.request.urlopen(request) as reply:
            return reply.status, reply.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read().decode("utf-8", errors="replace")


class ClientAPI:
    """One request to the service, with the callbacks that receive its outcome."""

    def __init__(self, transport: Transport | None = None) -> None:
        self.transport: Transport = transport or urllib_transport
        self.url = ""
        self.headers: dict[str, str] = {}
        self.request_object = JsonObject()
        self.response_object: JsonObject | None = None
        self.response_content = ""
        self.response_code = 0
        self.valid_json_response = False
        self.listeners: list[ResponseListener] = []
        self.on_failure: FailureCallback | None = None
        self.on_success_new_server: NewServerCallback | None = None
        self.on_success_server_list: ServerListCallback | None = None

    # Factories --------------------------------------------------------

    @classmethod
    def request_new_server(
        cls,
        request: ServerRequest,
        on_success: NewServerCallback | None,
        on_failure: FailureCallback | None,
    ) -> ClientAPI:
        """Prepare a request that starts a new dedicated server."""
        api = cls()
        api._set_common_headers(request.api_key, request.domain, request.server_app_name)
        api.set_header(
            "cmdLineParameters",
            f"-map={request.server_map_name} -maxPlayerNumPerDS={request.max_player}",
        )
        api.on_success_new_server = on_success
        api.on_failure = on_failure
        api.listeners.append(api._handle_new_server)
        api.url = START_SERVER_URL
        return api

    @classmethod
    def get_all_server_list(
        cls,
        request: ServerListRequest,
        on_success: ServerListCallback | None,
        on_failure: FailureCallback | None,
    ) -> ClientAPI:
        """Prepare a request for every running dedicated server."""
        return cls._server_list(request, on_success, on_failure, SERVER_LIST_URL)

    @classmethod
    def get_all_latest_version_server_list(
        cls,
        request: ServerListRequest,
        on_success: ServerListCallback | None,
        on_failure: FailureCallback | None,
    ) -> ClientAPI:
        """Prepare a request for the servers running the latest version."""
        return cls._server_list(request, on_success, on_failure, LATEST_SERVER_LIST_URL)

    @classmethod
    def _server_list(cls, request, on_success, on_failure, url) -> ClientAPI:
        api = cls()
        api._set_common_headers(request.api_key, request.domain, request.server_app_name)
        api.on_success_server_list = on_success
        api.on_failure = on_failure
        api.listeners.append(api._handle_server_list)
        api.url = url
        return api

    def _set_common_headers(self, api_key: str, domain: str, app_name: str) -> None:
        self.headers.clear()
        self.set_header("apiKey", api_key)
        self.set_header("domain", domain)
        self.set_header("appName", app_name)

    # Outcome handlers -------------------------------------------------

    def _handle_new_server(self, response: Response, successful: bool) -> None:
        error = response.response_error
        if error.has_error:
            if self.on_failure is not None:
                self.on_failure(error, error.has_error)
        elif self.on_success_new_server is not None:
            info = decode_requested_new_server_info(response.response_object)
            self.on_success_new_server(info, successful)

    def _handle_server_list(self, response: Response, successful: bool) -> None:
        error = response.response_error
        if error.has_error:
            if self.on_failure is not None:
                self.on_failure(error, error.has_error)
        elif self.on_success_server_list is not None:
            servers = decode_server_list(response.response_object or JsonObject())
            self.on_success_server_list(servers, successful)

    # Request handling -------------------------------------------------

    def set_header(self, name: str, value: str) -> None:
        """Add or replace a request header."""
        self.headers[name] = value

    def reset_response_data(self) -> None:
        """Forget anything kept from an earlier response."""
        if self.response_object is not None:
            self.response_object.reset()
        else:
            self.response_object = JsonObject()
        self.valid_json_response = False

    def _broadcast(self, response: Response, successful: bool) -> None:
        for listener in list(self.listeners):
            listener(response, successful)

    def process_response(self, succeeded: bool, status_code: int, body: str) -> None:
        """Decode a reply and hand the outcome to the listeners."""
        self.reset_response_data()
        if not self.listeners:
            logger.info("No listener is bound to receive the response.")
            return

        response = Response()
        if not succeeded:
            logger.info("Request failed: %s", self.url)
            response.response_error = ErrorHandle(
                has_error=True, error_code=503, error_message="Unable to contact server"
            )
            self._broadcast(response, False)
            return

        self.response_content = body
        self.response_code = status_code
        assert self.response_object is not None
        try:
            self.response_object.decode_json(body)
            self.valid_json_response = True
        except ValueError:
            self.valid_json_response = False
            logger.warning("JSON could not be decoded!")
        logger.info("Response : %s", body)

        response.response_object = self.response_object
        response.response_error.decode_error(self.response_object)
        self._broadcast(response, not response.response_error.has_error)

    def activate(self) -> None:
        """Send the request and deliver its outcome to the callbacks."""
        url = self.url.strip()
        body = self.request_object.encode_json()
        headers = {"Content-Type": "application/json", **self.headers}
        logger.info("Request Json: POST %s\nJSON(\n%s\n)JSON", url, body)
        try:
            status_code, text = self.transport(url, headers, body)
        except OSError:
            self.process_response(False, 0, "")
            return
        self.process_response(True, status_code, text)