from ..services.exceptions import DomainException, InternalException
import logging
import functools

logger = logging.getLogger(__name__)


def error_handler(func):
    """
    Middleware to handle errors in controllers.

    Domain errors are logged and re-raised as they are. Anything else,
    typically a command handler failing during replay, is logged and
    raised as a frontend friendly InternalException.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DomainException as e:
            logger.warning(
                "Domain exception of type %s occurred. Exception info: %s. "
                "Custom log message: %s",
                type(e).__name__,
                e,
                e.log_message,
                exc_info=True,
            )
            raise
        except Exception as e:
            logger.error(
                "Unexpected error of type %s occurred. Exception info: %s",
                type(e).__name__,
                e,
                exc_info=True,
            )
            raise InternalException(
                "An unexpected error occurred.\nPlease contact support.\nDetails logged."
            ) from e

    return wrapper
