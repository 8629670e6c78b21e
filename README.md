# e3dsclient

A small client library for a hosted dedicated-server service. It asks the
service to start a new game server, fetches the list of running servers, and
decodes the replies into plain `ServerInfo` records. It also contains a
lightweight JSON object model used for request and response bodies.

It needs only the Python standard library and supports Python 3.10 and later.

## Installation

```
pip install e3dsclient
```

## Modules

- `e3dsclient.jsonvalue` – `JsonType` and `JsonValue`, a typed wrapper around a
  single JSON value (null, string, number, boolean, array or object), or around
  no value at all (`JsonType.NONE`).
- `e3dsclient.jsonobject` – `JsonObject`, a JSON object kept as a plain `dict`
  in its `root` attribute, with typed field accessors, uniform-array helpers,
  merging, and encoding to and decoding from text.
- `e3dsclient.models` – `ServerRequest`, `ServerListRequest`, `ServerInfo`,
  `ErrorHandle` and `Response` dataclasses.
- `e3dsclient.decoder` – `parse_command_line`, `decode_requested_new_server_info`
  and `decode_server_list`.
- `e3dsclient.client` – `ClientAPI`, which builds and sends a request and routes
  its outcome to your callbacks, and `urllib_transport`, the default sender.

## Working with JSON

```python
from e3dsclient.jsonobject import JsonObject
from e3dsclient.jsonvalue import JsonValue

obj = JsonObject()
obj.set_string_field("appName", "MyGame")
obj.set_number_field("dsPort", 7777)
obj.set_string_array_field("tags", ["eu", "ranked"])
obj.set_field("ready", JsonValue.from_bool(True))

text = obj.encode_json()   # condensed: {"appName":"MyGame","dsPort":7777,...}

copy = JsonObject()
copy.decode_json(text)
print(copy.get_string_field("appName"))    # MyGame
print(copy.get_integer_field("dsPort"))    # 7777
print(copy.field_names())
```

Behaviour worth knowing:

- `decode_json` raises `ValueError` (after clearing all fields) when the text is
  not a JSON object.
- `get_string_field`, `get_number_field`, `get_bool_field`, `get_array_field`
  and `get_object_field` raise `KeyError` for a missing field and `TypeError`
  for a field of another kind. `get_integer_field` instead returns `0` when the
  field is missing or not a number, and truncates otherwise.
- `get_field` returns an empty `JsonValue` for a missing field; `set_field`
  stores an empty value as null, and `set_array_field` leaves empty values out.
- Objects returned by `get_object_field`, `get_object_array_field` and
  `JsonValue.as_object` share their data with the object they came from.
- `merge_json_object(other, overwrite)` copies fields from `other`, keeping
  existing fields unless `overwrite` is true.

## Decoding service replies

```python
from e3dsclient.decoder import decode_requested_new_server_info
from e3dsclient.jsonobject import JsonObject

reply = JsonObject()
reply.decode_json(
    '{"data": {"appName": "MyGame", "map": "Lobby", "serverPublicIp": "192.0.2.10",'
    ' "dsPort": 7777, "playerNum": 2,'
    ' "CmdLineParameters4DS": "-map=Lobby -maxPlayerNumPerDS=8"}}'
)
info = decode_requested_new_server_info(reply)
# ServerInfo(server_app_name='MyGame', server_map_name='Lobby',
#            ip_address='192.0.2.10', port=7777, current_player=2, max_player=8)
```

`parse_command_line` splits a command line into tokens, switches (words that
start with `-`) and `key=value` parameters; `CommandLine.param` looks a
parameter up without regard to case. The maximum player count comes from the
`-maxPlayerNumPerDS=` parameter.

`decode_requested_new_server_info(None)` returns a record marked `"Invalid"`
with `-1` counts. `decode_server_list` reads `data.dsServerList`, skips entries
without `appInfo`, takes the map name from the `-map=` parameter, and uses a
maximum of 10 players when no `-maxPlayerNumPerDS=` is given.

## Requesting servers

`ClientAPI.request_new_server`, `ClientAPI.get_all_server_list` and
`ClientAPI.get_all_latest_version_server_list` each take a request record and
two callbacks, and return a prepared `ClientAPI`. `activate()` sends it:

```python
from e3dsclient.client import ClientAPI
from e3dsclient.models import ServerRequest


def on_success(server_info, succeeded):
    print("server ready:", server_info)


def on_failure(error, has_error):
    print("request failed:", error.error_code, error.error_message)


request = ServerRequest(
    api_key="placeholder",
    server_app_name="MyGame",
    server_map_name="Lobby",
    max_player=8,
)
call = ClientAPI.request_new_server(request, on_success, on_failure)
call.activate()
```

The request record's fields are sent as the `apiKey`, `domain` and `appName`
headers; a new-server request also sends `cmdLineParameters` as
`-map=<map> -maxPlayerNumPerDS=<n>`. Extra headers can be added with
`set_header(name, value)` before `activate()`. The body is an empty JSON object
posted with `Content-Type: application/json`.

The list requests pass a list of `ServerInfo` records to the success callback.
If the transport raises `OSError`, the failure callback receives an
`ErrorHandle` with code 503 and the message `"Unable to contact server"`. If the
reply body holds an `error` field, the failure callback receives that message
with the reply's `status` field as the code.

`activate()` sends through `urllib_transport` by default. Any callable taking
`(url, headers, body)` and returning `(status_code, text)` can be used instead,
by passing it to `ClientAPI(transport=...)` or assigning `call.transport` before
`activate()`. A reply already in hand can be fed in directly with
`process_response(succeeded, status_code, body)`.

## What it does not do

`activate()` blocks until the reply arrives; there is no asynchronous or
background sending, no retrying, and no command-line tool.