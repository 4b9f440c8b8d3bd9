"""Static file serving."""

from trainfresh.adapters.web.servers.static_file_server import (
    StaticFileCacheApp,
    StaticFileServer,
    find_static_dir,
)

__all__ = ["StaticFileCacheApp", "StaticFileServer", "find_static_dir"]
