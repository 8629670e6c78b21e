import json

from e3dsclient.decoder import (
    decode_requested_new_server_info,
    decode_server_list,
    parse_command_line,
)
from e3dsclient.jsonobject import JsonObject
from e3dsclient.models import ServerInfo


def _obj(data):
    obj = JsonObject()
    obj.decode_json(json.dumps(data))
    return obj


def test_parse_params_and_switches():
    parsed = parse_command_line("-map=Lobby -maxPlayerNumPerDS=4 -log")
    assert parsed.params == {"map": "Lobby", "maxPlayerNumPerDS": "4"}
    assert parsed.switches == ["map=Lobby", "maxPlayerNumPerDS=4", "log"]
    assert parsed.tokens == []


def test_parse_plain_tokens():
    parsed = parse_command_line("run  now -fast")
    assert parsed.tokens == ["run", "now"]
    assert parsed.switches == ["fast"]


def test_parse_quoted_value():
    parsed = parse_command_line('-map="My Map" other')
    assert parsed.param("map") == "My Map"
    assert parsed.tokens == ["other"]


def test_param_lookup_ignores_case():
    parsed = parse_command_line("-MAP=Arena")
    assert parsed.param("map") == "Arena"
    assert parsed.param("missing", "fallback") == "fallback"


def test_later_param_replaces_earlier():
    parsed = parse_command_line("-map=A -Map=B")
    assert parsed.param("map") == "B"
    assert len(parsed.params) == 1


def test_decode_new_server_none():
    info = decode_requested_new_server_info(None)
    assert info == ServerInfo("Invalid", "Invalid", "0.0.0.0", -1, -1, -1)


def test_decode_new_server_without_data():
    assert decode_requested_new_server_info(_obj({"other": 1})) == ServerInfo()


def test_decode_new_server_full():
    response = _obj(
        {
            "data": {
                "appName": "app",
                "map": "Lobby",
                "serverPublicIp": "10.0.0.5",
                "dsPort": 7777,
                "playerNum": 2,
                "CmdLineParameters4DS": "-map=Lobby -maxPlayerNumPerDS=8",
            }
        }
    )
    info = decode_requested_new_server_info(response)
    assert info == ServerInfo("app", "Lobby", "10.0.0.5", 7777, 2, 8)


def test_decode_new_server_defaults_in_data():
    info = decode_requested_new_server_info(_obj({"data": {}}))
    assert info.server_app_name == ""
    assert info.server_map_name == ""
    assert info.ip_address == "0.0.0.0"
    assert info.port == 0
    assert info.max_player == 0


def test_decode_new_server_max_player_leading_digits():
    response = _obj({"data": {"CmdLineParameters4DS": "-maxPlayerNumPerDS=12abc"}})
    assert decode_requested_new_server_info(response).max_player == 12


def test_decode_server_list():
    response = _obj(
        {
            "data": {
                "dsServerList": [
                    {
                        "serverPublicIp": "10.0.0.7",
                        "appInfo": {
                            "appName": "game",
                            "dsPort": 7000,
                            "playerNum": 3,
                            "CmdLineParameters4DS": "-map=Arena -maxPlayerNumPerDS=6",
                        },
                    },
                    {"serverPublicIp": "10.0.0.8"},
                    {"appInfo": {}},
                ]
            }
        }
    )
    servers = decode_server_list(response)
    assert servers[0] == ServerInfo("game", "Arena", "10.0.0.7", 7000, 3, 6)
    assert len(servers) == 2
    assert servers[1] == ServerInfo("No Valid App Name", "", "No IP Address", 0, 0, 10)


def test_decode_server_list_without_data():
    assert decode_server_list(_obj({"error": "x"})) == []
    assert decode_server_list(_obj({"data": {}})) == []