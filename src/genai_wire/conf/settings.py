"""
Codec settings.

Three layers, highest first: runtime overrides, any layers passed to the
constructor, then `DEFAULTS`. Only keys that appear in `DEFAULTS` are
accepted and every value must be a bool; anything else raises
`ConfigurationError` when it is set, not when a codec call reads it.

Config modules and mappings carry namespaced keys
(``GENAI_WIRE_ENSURE_ASCII = True``); the prefix is stripped on load.
"""
import importlib
import os
from collections import ChainMap
from typing import Any, Iterator, Mapping, MutableMapping

from ..exceptions import ConfigurationError
from .defaults import DEFAULTS

CONFIG_MODULE_ENVVAR = "GENAI_WIRE_CONFIG_MODULE"
NAMESPACE = "GENAI_WIRE"


class Settings(MutableMapping[str, Any]):
    def __init__(self, *layers: Mapping[str, Any]) -> None:
        self._storage = ChainMap({}, *(_checked(layer) for layer in layers), dict(DEFAULTS))

    def __getitem__(self, key: str) -> Any:
        return self._storage[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._storage.maps[0].update(_checked({key: value}))

    def __delitem__(self, key: str) -> None:
        del self._storage.maps[0][key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    @property
    def accept_numeric_int64(self) -> bool:
        """Decode bare JSON integers into int64 fields."""
        return self["ACCEPT_NUMERIC_INT64"]

    @property
    def ensure_ascii(self) -> bool:
        """Escape non-ASCII characters in encoded output."""
        return self["ENSURE_ASCII"]

    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str = NAMESPACE) -> None:
        self._storage.maps[0].update(_checked(_strip_namespace(mapping, namespace)))

    def update_from_object(self, obj: str, *, namespace: str = NAMESPACE) -> None:
        """Load namespaced settings from the module named `obj`."""
        module = importlib.import_module(obj)
        self.update_from_mapping(vars(module), namespace=namespace)

    def update_from_envvar(self, envvar: str = CONFIG_MODULE_ENVVAR, *, namespace: str = NAMESPACE) -> None:
        module_name = os.environ.get(envvar)
        if not module_name:
            return
        self.update_from_object(module_name, namespace=namespace)

    def reset(self) -> None:
        """Drop every runtime override."""
        self._storage.maps[0].clear()


def _strip_namespace(mapping: Mapping[str, Any], namespace: str) -> dict[str, Any]:
    prefix = f"{namespace}_"
    return {key[len(prefix) :]: value for key, value in mapping.items() if key.startswith(prefix)}


def _checked(mapping: Mapping[str, Any]) -> dict[str, bool]:
    for key, value in mapping.items():
        if key not in DEFAULTS:
            raise ConfigurationError(f"Unknown genai_wire setting: {key!r}")
        if not isinstance(value, bool):
            raise ConfigurationError(f"Setting {key!r} must be a bool, got {type(value).__name__}")
    return dict(mapping)
