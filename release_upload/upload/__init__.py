"""Release asset upload client."""

from .client import ReleaseAssetClient, UploadResult, expand_upload_url

__all__ = ['ReleaseAssetClient', 'UploadResult', 'expand_upload_url']
