"""In-process function invoker."""

from typing import Any, Iterable, Optional

from mindtrade.core.exceptions import NotFoundError
from mindtrade.core.result import FunctionResult
from mindtrade.functions.base import ProxyFunction


class FunctionRegistry:
    """Looks up proxy functions by name and invokes them with a JSON body."""

    def __init__(self, functions: Iterable[ProxyFunction] = ()):
        self._functions: dict[str, ProxyFunction] = {}
        for function in functions:
            self.register(function)

    def register(self, function: ProxyFunction) -> None:
        self._functions[function.name] = function

    def get(self, name: str) -> ProxyFunction:
        function = self._functions.get(name)
        if function is None:
            raise NotFoundError("Function", name)
        return function

    def names(self) -> list[str]:
        return sorted(self._functions)

    def invoke(self, name: str, body: Optional[dict[str, Any]] = None) -> FunctionResult:
        """Call a function as ``POST`` and wrap its answer in a FunctionResult."""
        response = self.get(name).handle("POST", body if body is not None else {})
        return FunctionResult.from_payload(response.status_code, response.body)
