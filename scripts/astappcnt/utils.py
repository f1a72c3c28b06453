from typing import Mapping, TypeVar

U = TypeVar("U", bound=Mapping)


def resolve_config(config: Mapping | None, default_config: U) -> U:
    """Overlay the known keys of ``config`` onto a copy of ``default_config``."""
    _config = dict(default_config)
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config  # type: ignore[return-value]


def offset_to_line_column(text: str, position: int) -> tuple[int, int]:
    position = max(0, min(position, len(text)))
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column
