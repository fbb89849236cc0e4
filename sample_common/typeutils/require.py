from typing import Any, Type, TypeVar, Tuple, cast

T = TypeVar('T')

def require_present(value: T | None, name: str) -> T:
    """
    Reject an absent (`None`) argument at the point of invocation.

    Args:
        value (T | None):
            The argument to check.
        name (str):
            The argument name used in the error message.

    Returns:
        T:
            The value, unchanged.

    Raises:
        ValueError:
            If the value is None.
    """
    if value is None:
        raise ValueError(f"{name} must not be None")
    return value

def require_instance(tp: Type[T] | Tuple[Type[T], ...], value: object, name: str) -> T:
    """
    Validate a caller-supplied argument at the point of invocation.

    An absent value (`None`) and a value of the wrong type are reported separately, so callers
    can tell a missing argument from a malformed one. The check is shallow: only the outermost
    type is verified, element types of containers are not inspected.

    Args:
        tp (Type[T] or Tuple[Type[T], ...]):
            The accepted type or tuple of types.
        value (object):
            The argument to validate.
        name (str):
            The argument name used in error messages.

    Returns:
        T:
            The value, unchanged, narrowed to the accepted type.

    Raises:
        ValueError:
            If the value is None.
        TypeError:
            If the value is not an instance of the given type(s).

    Example:
        >>> require_instance(str, "hello", "text")
        'hello'

        >>> require_instance(str, None, "text")
        ValueError: text must not be None

        >>> require_instance((int, float), "1", "a")
        TypeError: a: expected int, float, got str
    """
    present = require_present(value, name)

    if not isinstance(present, tp):
        accepted: Tuple[Type[Any], ...] = tp if isinstance(tp, tuple) else (tp,)
        raise TypeError(
            f"{name}: expected {', '.join(t.__name__ for t in accepted)}, "
            f"got {type(present).__name__}"
        )

    return cast(T, present)
