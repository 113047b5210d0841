"""Skin-tone handling options shared by the forward converters."""

from enum import Enum

from ..exceptions import ConfigurationError


class FitzpatrickAction(Enum):
    """What a forward converter does with a matched skin-tone modifier.

    PARSE: encode it (alias output gains ``|type_N``, html output drops it)
    PARSE_AND_ADD_SPACE: like PARSE, with every converted emoji framed by spaces.
        Applies to alias and html output alike, with or without a skin tone
        (emoji-java pads only alias output that carries a skin tone).
    REMOVE: drop it
    IGNORE: copy the raw modifier after the converted emoji
    """

    PARSE = "parse"
    PARSE_AND_ADD_SPACE = "parse_and_add_space"
    REMOVE = "remove"
    IGNORE = "ignore"

    @property
    def adds_space(self) -> bool:
        return self is FitzpatrickAction.PARSE_AND_ADD_SPACE

    @classmethod
    def from_name(cls, name: "str | FitzpatrickAction") -> "FitzpatrickAction":
        """Resolve a config/CLI value such as ``"remove"`` or ``"PARSE"``."""
        if isinstance(name, FitzpatrickAction):
            return name
        normalized = str(name).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(action.value for action in cls)
            raise ConfigurationError(f"Unknown fitzpatrick action {name!r} (expected one of: {valid})") from None


__all__ = ["FitzpatrickAction"]
