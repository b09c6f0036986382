# urlshort/config.py

HOST = "0.0.0.0"
PORT = 8080

CONFIG_PATH = "data/map.json"  # relative to the working directory

DEFAULT_BODY = "Hello, world!\n"

# Checked after the config file, before the default handler
BUILTIN_PATHS = {
    "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
    "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
}
