# filesync

Share files between devices on the same local network. A device runs a small
HTTP server that peers upload files to and download files from. The package
also generates Wi-Fi hotspot credentials for a peer, keeps a SQLite store for
the transfer history, and provides SVG icons, platform logos and a table of
screen routes for building an interface on top.

## Installation

```
pip install filesync
```

For running the tests:

```
pip install "filesync[test]"
pytest
```

## Running the file server

```
filesync-server
```

Options:

- `--host ADDRESS`: address to bind. By default the machine's local network
  address is used, or `0.0.0.0` if none can be found.
- `--port PORT`: port to listen on (default `18005`).
- `--upload-dir DIR`: where received files are saved (default: a `filesync`
  folder inside the user's downloads directory).

The address is printed at start-up and the server runs until interrupted.
Requests that declare a body larger than 10 GiB are answered with
`413`. Every response carries CORS headers allowing any origin and header and
the `GET` and `POST` methods; CORS preflight `OPTIONS` requests are answered
with `200`.

Endpoints:

| Method | Path                      | Purpose                                           |
|--------|---------------------------|---------------------------------------------------|
| `GET`  | `/health`                 | Readiness check, returns JSON                     |
| `POST` | `/health`, `/upload`      | Multipart upload; every file field is saved       |
| `GET`  | `/api/file?file_path=...` | Download the given file as an attachment          |

A request to a path with no route gets a JSON `404` response.

An upload whose file name is not one plain path component, such as
`../secret.txt` or `/etc/passwd`, is rejected with `400 Bad Request`; fields
without a file name are skipped. A download answers `404` when the file cannot
be opened and `400` when its MIME type cannot be guessed from its name, or when
the `file_path` parameter is missing.

## Using it as a library

Build the web application and serve it yourself:

```python
from aiohttp import web
from filesync.handlers import create_app

app = create_app("/tmp/incoming")
web.run_app(app, port=18005)
```

Or use the ready-made server, which adds the CORS handling and body limit:

```python
import asyncio
from filesync.server import HttpServer

server = HttpServer(port=18005)
print(server.address())
asyncio.run(server.run())
```

`filesync.handlers.path_is_valid(name)` tells whether an upload name is safe,
and `default_upload_directory()` gives the default destination folder.
`filesync.server.local_ip()` returns the local network address.

### Hotspot credentials

```python
from filesync.credentials import WifiCredentials, generate_android_wifi_credentials

creds = generate_android_wifi_credentials()
print(creds)                    # "<ssid>::<passkey>"
data = creds.to_dict()          # {"ssid": ..., "passkey": ...}
same = WifiCredentials.from_dict(data)
```

The SSID is a four-digit number (`generate_random_digits()`) and the passkey
is eight characters drawn from lower- and upper-case letters, digits and
punctuation (`generate_passkey()`). `WifiCredentials` rejects an SSID outside
0 to 65535, and `from_dict` raises `ValueError` for a missing field.

### Platforms

```python
from filesync.platform import Platform

Platform.from_str(" Android ")  # Platform.ANDROID
str(Platform.ANDROID)           # "android"
Platform.IOS.is_mobile()        # True
```

The platforms are `ANDROID`, `IOS`, `MAC`, `LINUX` and `WINDOWS`. An unknown
name raises `PlatformParseError`.

### Transfer history

```python
from filesync.database import open_database

connection = open_database("filesync.db")
```

This creates the database and its parent directories if needed, switches it
to WAL journaling and applies the schema migrations in `MIGRATIONS`, which set
up the `transfer_history` table. `apply_migrations(connection, migrations)`
applies any list of `Migration` objects, skipping versions already applied,
and returns the versions it applied. A failure to prepare the database raises
`StartupError`.

### Icons and logos

`filesync.icons` returns SVG markup as strings, for example
`upload_icon()`, `settings_icon_outline()` or `cloud_upload_icon("animate-pulse")`.
`filesync.logos` has `android_logo()`, `mac_os_logo()`,
`windows_platform_logo()`, `linux_logo()`, and `logo_for(platform)`, which
takes a `Platform` or its name and raises `ValueError` for iOS, which has no
logo.

### Screen routes

`filesync.navigation.resolve_screen(path)` maps a route such as `/send` or
`/history` to the name of the screen it shows, and returns `"Not found."` for
any other path.

## What this package does not do

- It has no graphical interface: the icons, logos and routes are data for one,
  but no screens are drawn.
- It does not create a Wi-Fi hotspot or render QR codes; it only generates the
  credentials.
- The history store sets up the `transfer_history` table; reading and writing
  transfer records is left to the caller through the `sqlite3` connection.