# gamestore/utils/retry.py
from sqlalchemy.exc import IntegrityError
from tenacity import retry, stop_after_attempt, retry_if_exception_type


def integrity_retry():
    # a concurrent insert of the same (user, juego) pair trips the unique constraint,
    # the second attempt takes the update path
    return retry(
        reraise=True,
        stop=stop_after_attempt(2),
        retry=retry_if_exception_type(IntegrityError),
    )
