import logging

import requests
from requests.adapters import HTTPAdapter, Retry


def wait_for_stream(url: str, retries: int = 5, backoff_factor: float = 0.5, timeout: float = 5) -> bool:
    """
    Waits until a network stream (e.g. an mjpeg server) answers, so a recording does not
    start before its input is up. Returns False if the stream never became available.
    """
    s = requests.Session()
    retry = Retry(total=retries, backoff_factor=backoff_factor, status_forcelist={502, 503, 504})
    s.mount("http://", HTTPAdapter(max_retries=retry))
    s.mount("https://", HTTPAdapter(max_retries=retry))

    try:
        # only the response headers are needed, never read the stream body
        with s.get(url, stream=True, timeout=timeout) as r:
            r.raise_for_status()
    except requests.exceptions.RequestException as e:
        logging.warning("stream %s is not available: %s", url, e)
        return False
    finally:
        s.close()
    logging.debug("stream %s is available", url)
    return True
