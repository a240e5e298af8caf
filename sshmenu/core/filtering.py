"""Search helpers for flattening the project tree into a filtered list."""

from __future__ import annotations

from sshmenu.config import MenuConfig, Server

__all__ = ["filter_servers"]


def filter_servers(config: MenuConfig, search: str) -> list[Server]:
    """Return servers whose name or description contains ``search``.

    Matching is a case-insensitive substring test. Results keep project order
    and, within a project, declaration order.
    """

    needle = search.lower()
    matches: list[Server] = []
    for project in config.projects:
        for server in project.servers:
            if needle in server.name.lower() or needle in server.description.lower():
                matches.append(server)
    return matches
