'''
randomized test data for lazyseq.

schemas are plain python values: a faker provider name ('word'), a
(provider, kwargs) tuple, a dict of fields, or a dict carrying a
'_qen_provider' key ('choice', 'literal').
'''

import numpy as np
from faker import Faker
from lazyseq import wrap, LazySequence
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter backed by faker and a numpy rng."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # numpy returns numpy scalars; hand back native python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def integers(self, size: int, low: int = 0, high: int = 100) -> List[int]:
        return self._rng.integers(low, high, size=size).tolist()


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> LazySequence:
        return wrap([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def random_ints(size: int, seed: Optional[int] = None, low: int = 0, high: int = 100) -> List[int]:
    """a plain list of random ints, for checking lazy chains against eager list code"""
    return Generator(seed).integers(size, low, high)
