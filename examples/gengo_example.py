"""
Gengo client example

Demonstrates synchronous calls, callbacks and fire-and-forget submissions
against the Gengo sandbox.  Set GENGO_PUBLIC_KEY and GENGO_PRIVATE_KEY first.
"""

import json

from gengo_lib import GengoClient, GengoError
from gengo_lib.data_models.jobs import JobsCreate
from gengo_lib.utils.logger import prepare_logger

from constants import PUBLIC_KEY, PRIVATE_KEY, SANDBOX


class GengoExamples:
    """
    Helper class that groups the example calls.
    Usage:
        with GengoExamples() as examples:
            examples.basic_example()
    """

    def __init__(self):
        self.client = GengoClient(
            PUBLIC_KEY,
            PRIVATE_KEY,
            sandbox=SANDBOX,
            logger=prepare_logger("gengo_example", level="DEBUG"),
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.client.close()

    # ---------------------------
    # 1. Basic Example
    # ---------------------------
    def basic_example(self):
        """Account balance and supported language pairs"""
        print(json.dumps(self.client.account.balance(), indent=2))
        pairs = self.client.service.language_pairs({"lcSrc": "en"})
        print(f"{len(pairs)} language pairs from English")

    # ---------------------------
    # 2. Quote
    # ---------------------------
    def quote_example(self):
        """Price quote for a single text job"""
        payload = JobsCreate(
            jobs={
                "job_1": {
                    "type": "text",
                    "body_src": "Explain what a translation API is in one sentence.",
                    "lc_src": "en",
                    "lc_tgt": "ja",
                    "tier": "standard",
                }
            }
        )
        print(json.dumps(self.client.service.quote(payload), indent=2))

    # ---------------------------
    # 3. Errors
    # ---------------------------
    def error_example(self):
        """API-reported errors are raised as ApiError"""
        try:
            self.client.job.get(0)
        except GengoError as exc:
            print(f"{exc.kind}: {exc.message}")

    # ---------------------------
    # 4. Callbacks
    # ---------------------------
    def callback_example(self):
        """Background call with a (error, result) callback"""

        def on_stats(error, result):
            if error is not None:
                print(f"stats failed: {error}")
            else:
                print(f"stats: {result}")

        future = self.client.submit(self.client.account.stats, callback=on_stats)
        future.result()

        # No callback wanted: failures end up in the log only
        self.client.fire_and_forget(self.client.account.preferred_translators)


if __name__ == "__main__":
    with GengoExamples() as examples:
        examples.basic_example()
        examples.quote_example()
        examples.error_example()
        examples.callback_example()
