# servicekit

A small HTTP service skeleton. It reads a YAML configuration (with an
optional per-profile file), sets up console and file logging, and serves
a few JSON endpoints with Flask. Helpers for Redis, files, random strings
and timestamps come with it.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the service

```
servicekit --config-dir ./configs
```

`-config-dir` is accepted as well; the default is `./configs`.

The command loads the configuration, logs a start-up banner together with
the operating system, architecture, Python version, project version
(`servicekit.version.VERSION`, `1.0.0.8bcf8fe7_Alpha`) and configuration
directory, then starts the HTTP server in a background thread on
`0.0.0.0:<app.httpPort>`. It waits for SIGINT or SIGTERM and then exits.
If the configuration cannot be read, the error is logged and the command
exits with status 1.

## Configuration

`servicekit.config.load_config(conf_path, profile)` reads `app.yaml` (or
`app.yml`) from `conf_path` (`./configs` when empty). Keys are looked up
case-insensitively. From this base file it takes `app.name`, `app.type`
and `app.profile`; a non-empty `profile` argument takes the place of
`app.profile`.

When a profile is active (for example `dev`), `app-dev.yaml` is read and
the remaining settings — `app.httpPort`, `app.mode` and the `log.*` keys —
are taken from that file alone. Without a profile they come from the base
file. A missing or unreadable file raises `servicekit.config.ConfigError`.
The result is an `AppConfig` dataclass.

`app.yaml`:

```yaml
app:
  name: demo
  type: satellite-a
  profile: dev
```

`app-dev.yaml`:

```yaml
app:
  httpPort: "8080"
  mode: debug        # release, test or debug
log:
  enable2file: false
  path: ./logs
  level: 7
  maxdays: 7
```

Loading the configuration also calls `configure_logging(config)`: the
`servicekit` logger always writes to the console, and when
`log.enable2file` is true it also writes to `<log.path>/<app.name>.log`
(`AppConfig.log_file()`), rotated at midnight and keeping `log.maxdays`
old files. `log.level` runs from 0 (emergency) to 7 (debug) and sets the
file handler's threshold. `print_banner(logger)` logs the start-up banner.

## Endpoints

Every response is a JSON envelope `{"code": ..., "msg": ..., "data": ...}`
with HTTP status 200 and `content-type: application/json`; code `10000`
means success and `10001` failure.

| Path             | Data                               |
|------------------|------------------------------------|
| `/`              | the application name               |
| `/push/health`   | `{"satellite": <app.type>}`        |
| `/push/getName`  | `"hello"`                          |

`servicekit.server.create_app(config, mode)` builds the Flask application;
a mode other than `release` or `test` is treated as `debug`, and `test`
turns on Flask's testing flag. `serve(http_port, mode, config)` runs it and
logs, rather than raises, an invalid port or a start-up failure.

## Using it as a library

```python
from servicekit.config import load_config
from servicekit.server import create_app
from servicekit.models import success, fail_with_msg

config = load_config("./configs", "")
app = create_app(config, "test")
client = app.test_client()
print(client.get("/push/health").get_json())

print(success({"id": 1}).to_dict())
print(fail_with_msg("bad request", None).to_dict())
```

`servicekit.models` also has `fail`, `fail_with_code_msg`, the `PushType`
enum (`NFS`, `FTP`) and the dataclasses `PushConfigModel`, `L2Algorithm`,
`HealthResp`, `SatelliteFileLevel` and `SatelliteFileLevelConfig`, each
with a `to_dict()` that uses the camel-case JSON field names.

Redis (database 0, no password):

```python
from servicekit.rdb import RedisStore

store = RedisStore("localhost", 6379, None)
store.set("name", "value")
print(store.get("name"))      # "" when the key is missing or Redis fails
store.delete("name")
```

Utilities:

```python
from servicekit.fileutils import copy_file, move_file, find_by_file_name, mkdir_all
from servicekit.randutils import rand_str
from servicekit.timeutils import current_time, bytes_to_beijing_time, format_time_floor_10_minutes

print(rand_str(8, None))                                 # eight ASCII letters
print(current_time(None))                                # e.g. 20240101120000
print(bytes_to_beijing_time(b"2024-01-01 00:00:00"))     # 20240101080000
print(format_time_floor_10_minutes(None))                # UTC, floored to 10 minutes
```

`find_by_file_name(directory, filename)` returns the base names of files
under `directory` whose name contains `filename`. `move_file` copies and
then removes the source. `mkdir_all` returns whether the directory could be
created; `file_exists`, `dir_exists` and `create_file` do what their names
say.

## What it does not do

- It does not run as a Windows service; it runs only as a foreground
  process that stops on SIGINT or SIGTERM.
- It has no build or distribution tooling of its own beyond the standard
  Python packaging above.
- The Redis helper is not used by the HTTP endpoints; wire it in yourself.