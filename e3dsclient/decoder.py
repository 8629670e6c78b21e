"""Turn server-management responses into ServerInfo records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .jsonobject import JsonObject
from .models import ServerInfo

logger = logging.getLogger("e3dsclient")

_WORD_PATTERN = re.compile(r'"(?P<quoted>[^"]*)"?|(?P<bare>(?:[^\s"]+|"[^"]*"?)+)')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_NO_PARAMETERS = "No Valid Parameters"


@dataclass
class CommandLine:
    """A command line split into plain tokens, switches and key=value parameters."""

    tokens: list[str] = field(default_factory=list)
    switches: list[str] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)

    def param(self, name: str, default: str | None = None) -> str | None:
        """The value of a parameter, matched without regard to case."""
        wanted = name.casefold()
        return next(
            (value for key, value in self.params.items() if key.casefold() == wanted),
            default,
        )


def _trim_quotes(text: str) -> str:
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def _atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_command_line(command_line: str) -> CommandLine:
    """Split a command line such as ``-map=Lobby -maxPlayerNumPerDS=4``.

    A word starting with ``-`` is a switch; a switch holding ``=`` is also a
    parameter, named by what comes before the first ``=``.
    """
    result = CommandLine()
    for match in _WORD_PATTERN.finditer(command_line):
        quoted = match.group("quoted")
        word = quoted if quoted is not None else match.group("bare")
        if not word.startswith("-"):
            result.tokens.append(word)
            continue
        switch = word[1:]
        result.switches.append(switch)
        if "=" in switch:
            key, value = switch.split("=", 1)
            existing = next(
                (name for name in result.params if name.casefold() == key.casefold()),
                None,
            )
            if existing is not None:
                del result.params[existing]
            result.params[key] = _trim_quotes(value)
    return result


def _string_or(obj: JsonObject, name: str, default: str) -> str:
    return obj.get_string_field(name) if obj.has_field(name) else default


def _int_or(obj: JsonObject, name: str, default: int) -> int:
    return obj.get_integer_field(name) if obj.has_field(name) else default


def decode_requested_new_server_info(response: JsonObject | None) -> ServerInfo:
    """Decode the answer to a request for a new server."""
    if response is None:
        logger.warning("DecodeRequestedNewServerInfo: Response is null.")
        return ServerInfo(
            server_app_name="Invalid",
            server_map_name="Invalid",
            ip_address="0.0.0.0",
            port=-1,
            current_player=-1,
            max_player=-1,
        )

    info = ServerInfo()
    if not response.has_field("data"):
        return info

    data = response.get_object_field("data")
    command_line = parse_command_line(_string_or(data, "CmdLineParameters4DS", _NO_PARAMETERS))
    info.server_app_name = _string_or(data, "appName", "")
    info.server_map_name = _string_or(data, "map", "")
    info.ip_address = _string_or(data, "serverPublicIp", "0.0.0.0")
    info.port = _int_or(data, "dsPort", 0)
    info.current_player = _int_or(data, "playerNum", 0)
    info.max_player = _atoi(command_line.param("maxPlayerNumPerDS", "0"))
    return info


def decode_server_list(response: JsonObject) -> list[ServerInfo]:
    """Decode the answer to a request for the list of servers."""
    if not response.has_field("data"):
        return []
    data = response.get_object_field("data")
    if not data.has_field("dsServerList"):
        return []

    servers = []
    for entry in data.get_object_array_field("dsServerList"):
        if not entry.has_field("appInfo"):
            continue
        app_info = entry.get_object_field("appInfo")
        command_line = parse_command_line(
            _string_or(app_info, "CmdLineParameters4DS", _NO_PARAMETERS)
        )
        max_player = command_line.param("maxPlayerNumPerDS")
        servers.append(
            ServerInfo(
                server_app_name=_string_or(app_info, "appName", "No Valid App Name"),
                server_map_name=command_line.param("map", ""),
                ip_address=_string_or(entry, "serverPublicIp", "No IP Address"),
                port=_int_or(app_info, "dsPort", 0),
                current_player=_int_or(app_info, "playerNum", 0),
                max_player=_atoi(max_player) if max_player is not None else 10,
            )
        )
    return servers