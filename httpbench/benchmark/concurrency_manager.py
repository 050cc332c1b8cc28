"""Manages concurrent request execution."""
import logging
import threading
import concurrent.futures
from typing import Callable
import requests

from httpbench.const import HTTP_OK
from .exceptions import RequestError
from .latency_recorder import LatencyRecorder, RequestCounters
from .request_executor import RequestExecutor
from .work_queue import HandoffQueue


# Configure logging
logger = logging.getLogger(__name__)


class ConcurrencyManager:
    """Distributes work tokens to a fixed pool of worker threads.

    A single producer hands one token per request through an unbuffered
    queue; every worker performs one GET per token it receives. A worker that
    hits a transport error or a non-200 status stops draining the queue, the
    remaining workers carry on.
    """

    def __init__(self, request_executor: RequestExecutor, recorder: LatencyRecorder,
                 counters: RequestCounters, log_error: Callable[[str], None]):
        self.request_executor = request_executor
        self.recorder = recorder
        self.counters = counters
        self.log_error = log_error

    @staticmethod
    def produce(work: HandoffQueue, requests_count: int) -> None:
        """Hand out one token per request, then close the queue."""
        for _ in range(requests_count):
            if not work.put(object()):
                logger.debug("Work queue closed before every token was handed out")
                return
        work.close()

    def do_requests(self, session: requests.Session, work: HandoffQueue) -> None:
        """Worker loop: one request per token until the queue closes or a request fails."""
        for _ in work:
            self.counters.record_request()
            try:
                status_code, latency_ms = self.request_executor.send_request(session)
            except RequestError as e:
                self.counters.record_failure()
                self.log_error(f"{e}\n")
                return
            self.recorder.record(latency_ms)
            if status_code != HTTP_OK:
                self.log_error(f"unexpected status code {status_code}\n")
                self.counters.record_failure()
                return
            self.counters.record_success()

    def dispatch(self, session: requests.Session, work: HandoffQueue, requests_count: int, concurrency: int) -> None:
        """
        Run requests_count requests over concurrency workers and wait for all of them.

        Args:
            session: Requests session shared by the workers.
            work: Queue the tokens are handed through.
            requests_count: Number of tokens to produce.
            concurrency: Number of worker threads.
        """
        producer = threading.Thread(
            target=self.produce, args=(work, requests_count), name="httpbench-producer", daemon=True
        )
        producer.start()
        with concurrent.futures.ThreadPoolExecutor(max_workers=concurrency, thread_name_prefix="httpbench-worker") as executor:
            futures = [executor.submit(self.do_requests, session, work) for _ in range(concurrency)]
            concurrent.futures.wait(futures)

        # Every worker is gone; release the producer if it is still waiting.
        work.close()
        producer.join()
        for future in futures:
            future.result()
