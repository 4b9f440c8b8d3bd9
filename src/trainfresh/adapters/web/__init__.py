"""Web adapters for the gate and the passenger app."""

from trainfresh.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
