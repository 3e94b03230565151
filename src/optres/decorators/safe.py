"""@safe and @safe_async: calls that return Ok(result) or Err(exception).

Example:
    ```python
    @safe
    def divide(a: int, b: int) -> float:
        return a / b

    divide(10, 2)  # Ok(value=5.0)
    divide(10, 0)  # Err(error=ZeroDivisionError('division by zero'))

    @safe(exceptions=(KeyError,))
    def lookup(table: dict, key: str) -> int:
        return table[key]
    ```
"""

from optres.decorators._builder import catching_decorator
from optres.types.result import Err, Ok

__all__ = ['safe', 'safe_async']

safe = catching_decorator('safe', Ok, Err)
safe_async = catching_decorator('safe_async', Ok, Err, is_async=True)
