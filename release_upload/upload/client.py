"""
Release asset upload over the GitHub REST API.

The release payload's upload_url is an RFC 6570 template such as
https://uploads.github.com/repos/o/r/releases/1/assets{?name,label};
the template suffix is dropped and the asset name sent as a query parameter.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import quote, urlencode

import requests

from release_upload.exceptions import UploadError


logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = '2022-11-28'


@dataclass
class UploadResult:
    """Asset metadata returned by the upload endpoint."""
    browser_download_url: str
    asset_id: Optional[int] = None
    name: str = ''
    size: int = 0
    state: str = ''

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'UploadResult':
        url = data.get('browser_download_url')
        if not url:
            raise UploadError("Upload response did not include browser_download_url")
        return cls(
            browser_download_url=url,
            asset_id=data.get('id'),
            name=data.get('name', ''),
            size=data.get('size', 0),
            state=data.get('state', ''),
        )


def expand_upload_url(upload_url: str, name: str, label: Optional[str] = None) -> str:
    """
    Turn the payload's upload URL template into a concrete request URL.

    Args:
        upload_url: upload_url from the release payload
        name: Asset display name
        label: Optional asset label

    Returns:
        URL with name (and label) query parameters
    """
    base = upload_url.split('{', 1)[0]
    params = {'name': name}
    if label:
        params['label'] = label
    separator = '&' if '?' in base else '?'
    return f"{base}{separator}{urlencode(params, quote_via=quote)}"


class ReleaseAssetClient:
    """Uploads release assets with a token-authenticated requests session."""

    def __init__(
        self,
        token: str,
        api_version: str = DEFAULT_API_VERSION,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {token}",
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': api_version,
        })
        self.timeout = timeout

    def upload_asset(
        self,
        upload_url: str,
        path: Union[str, Path],
        name: str,
        mime: str
    ) -> UploadResult:
        """
        Upload a file as a release asset.

        Args:
            upload_url: upload_url from the release payload
            path: Local file to upload
            name: Asset display name
            mime: Content type of the asset

        Returns:
            UploadResult with the public download URL

        Raises:
            OSError: If the file cannot be read
            UploadError: If the request fails or the API rejects it
        """
        file_path = Path(path)
        data = file_path.read_bytes()
        headers = {
            'Content-Type': mime,
            'Content-Length': str(len(data)),
        }
        url = expand_upload_url(upload_url, name)

        logger.info(f"Uploading {file_path} ({len(data)} bytes) as '{name}'")
        try:
            response = self.session.post(url, data=data, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise UploadError(f"Upload request failed: {e}") from e

        if not response.ok:
            raise UploadError(
                f"Upload failed with HTTP {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UploadError(f"Upload response is not valid JSON: {e}") from e

        result = UploadResult.from_response(payload)
        logger.info(f"Uploaded asset available at {result.browser_download_url}")
        return result

    def close(self):
        self.session.close()


def _error_message(response: requests.Response) -> str:
    """Best-effort extraction of the API error message."""
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason or 'no response body'
    if isinstance(data, dict) and data.get('message'):
        return str(data['message'])
    return response.text
