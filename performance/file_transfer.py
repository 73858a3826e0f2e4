"""Upload and download throughput against an HTTP echo service: 5 users for 20s."""

import logging

from locust import HttpUser, constant, task

from storeqa.load.checks import has_json_key, run_checks
from storeqa.load.shapes import ConstantShape

UPLOAD_BODY = "This is a test file content for upload testing " + "x" * 1000
DOWNLOAD_BYTES = 1024


class FileTransferUser(HttpUser):
    host = "https://httpbin.org"
    wait_time = constant(1)

    @task
    def upload_then_download(self):
        with self.client.post(
            "/post", data=UPLOAD_BODY, headers={"Content-Type": "text/plain"}, name="POST /post", catch_response=True
        ) as upload:
            run_checks(
                upload,
                {
                    "upload successful": lambda r: r.status_code == 200,
                    "upload response contains data": lambda r: has_json_key(r, "data"),
                },
            )
        logging.info(f"Upload size: {len(UPLOAD_BODY)} bytes, Status: {upload.status_code}")

        with self.client.get(f"/bytes/{DOWNLOAD_BYTES}", name="GET /bytes", catch_response=True) as download:
            run_checks(
                download,
                {
                    "download successful": lambda r: r.status_code == 200,
                    "download size > 0": lambda r: len(r.content) > 0,
                },
            )
        logging.info(f"Download size: {len(download.content or b'')} bytes, Status: {download.status_code}")


class FileTransferShape(ConstantShape):
    users = 5
    duration = "20s"
