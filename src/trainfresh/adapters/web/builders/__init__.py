"""Template data builders."""

from trainfresh.adapters.web.builders.board_view_builder import BoardViewBuilder

__all__ = ["BoardViewBuilder"]
