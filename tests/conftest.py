import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from ezgif import EzgifClient

RESULT_HTML = '<p class="outfile"><img src="//s3.ezgif.com/tmp/ezgif-1-out.gif" style="width:300px"></p>'


class FakeEzgif:
    """Scripted stand-in for the ezgif site, used as an httpx MockTransport handler"""

    def __init__(self, job_ids=("ezgif-1-abc.webp",), result_html=RESULT_HTML, page_html="<html></html>",
                 upload_response=None):
        self.job_ids = list(job_ids)
        self.result_html = result_html
        self.page_html = page_html
        self.upload_response = upload_response
        self.requests = []
        self.uploads = []
        self.submitted = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.params.get("ajax") == "true":
            self.submitted = parse_qs(request.content.decode())
            return httpx.Response(200, text=self.result_html)

        if request.method == "POST":
            self.uploads.append(request)
            if self.upload_response is not None:
                return self.upload_response
            section = request.url.path.strip("/").split("/")[0]
            location = request.url.copy_with(path=f"/{section}/{self.job_ids.pop(0)}")
            return httpx.Response(302, headers={"Location": str(location)})

        return httpx.Response(200, text=self.page_html)


def build_frame_page(*frame_ids):
    """Maker job page listing the given frame ids"""
    frames = "".join(
        f'<div class="frame"><img src="/tmp/{frame_id}"><input type="hidden" value="{frame_id}" name="files[]">'
        f'<span class="frame-tools"><a href="#">remove</a></span></div>'
        for frame_id in frame_ids
    )
    return (
        '<form><p>Frames (drag and drop frames to change order)</p>'
        f'<div id="frames">{frames}</div>'
        '<p class="options"><strong>Toggle a range of frames:</strong> ...</p></form>'
    )


@pytest.fixture
def frame_page():
    return build_frame_page


@pytest.fixture
def fake_ezgif():
    return FakeEzgif


@pytest.fixture
def call():
    """Run one EzgifClient method against a fake upstream and return its result"""
    def run(handler, method, *args, **kwargs):
        async def go():
            async with EzgifClient(transport=httpx.MockTransport(handler)) as client:
                return await getattr(client, method)(*args, **kwargs)
        return asyncio.run(go())
    return run
