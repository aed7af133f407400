"""
Typed response pipeline.

Wraps the request executor with an optional transform step followed by an
optional validation step:

    raw = execute(descriptor)
    candidate = transformer(raw) if transformer else raw
    if validator and not validator(candidate): raise ShapeMismatchError
    return candidate

Validation runs against what the caller will actually receive, i.e. after the
transform. A candidate that fails validation is never returned.
"""

from typing import Any, Optional
import logging

from oeq_client.exceptions import MISMATCH_MESSAGE, ShapeMismatchError
from oeq_client.http import AsyncHTTPClient, RequestDescriptor
from oeq_client.shapes import Shape, Transformer, Validator

logger = logging.getLogger(__name__)


def _mismatch(validator: Validator, candidate: Any) -> ShapeMismatchError:
    if isinstance(validator, Shape):
        reason = validator.explain(candidate)
    else:
        reason = f"{type(candidate).__name__} rejected by {getattr(validator, '__name__', repr(validator))}"
    return ShapeMismatchError(f"{MISMATCH_MESSAGE} ({reason})")


async def typed_request(
    http: AsyncHTTPClient,
    descriptor: RequestDescriptor,
    validator: Optional[Validator] = None,
    transformer: Optional[Transformer[Any]] = None,
) -> Any:
    """
    Execute a request, then transform and validate the payload.

    Args:
        http: Client whose session the request runs in
        descriptor: What to request
        validator: Predicate the final value must satisfy. A ``Shape``
            additionally parses the value into its typed model.
        transformer: Pure function producing the final value from the raw
            payload. Must return a derived copy, never mutate its input.

    Returns:
        The typed value when a Shape is given, otherwise the (transformed)
        payload as-is

    Raises:
        NetworkError: No response was received
        HttpError: The server answered with a non-2xx status
        ShapeMismatchError: The payload could not be transformed, or failed
            validation
    """
    raw = await http.execute(descriptor)

    candidate = raw
    if transformer is not None:
        try:
            candidate = transformer(raw)
        except Exception as e:
            logger.warning(f"Transform failed for {descriptor.path}: {e}")
            raise ShapeMismatchError(f"{MISMATCH_MESSAGE} (transform failed: {e!r})") from e

    if validator is None:
        return candidate

    if not validator(candidate):
        error = _mismatch(validator, candidate)
        logger.warning(f"{descriptor.method.value} {descriptor.path}: {error.message}")
        raise error

    if isinstance(validator, Shape):
        return validator.parse(candidate)
    return candidate
