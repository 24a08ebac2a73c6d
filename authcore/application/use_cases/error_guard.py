"""Error boundary shared by use cases."""

import functools
import logging

from authcore.application.exceptions import ApplicationError, InternalError, ValidationError
from authcore.domain.exceptions import DomainException

logger = logging.getLogger(__name__)


def guard_errors(fallback: type[ApplicationError] = InternalError, message: str | None = None):
    """
    Decorate a use case ``execute`` coroutine so only application errors escape.

    Application errors pass through unchanged, domain rule violations become
    ``ValidationError`` and anything else is logged with its traceback and
    replaced by ``fallback``.

    Args:
        fallback: Application error raised in place of an unexpected exception
        message: Message for the fallback error (its default when omitted)
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except ApplicationError:
                raise
            except DomainException as exc:
                raise ValidationError(exc.message) from exc
            except Exception as exc:
                logger.exception(
                    "Unexpected error in %s", type(self).__name__,
                    extra={"error_type": type(exc).__name__},
                )
                if message is None:
                    raise fallback() from exc
                raise fallback(message) from exc

        return wrapper

    return decorator
