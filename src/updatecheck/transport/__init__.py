from .downloader import Downloader, HelperProcessDownloader, RequestsDownloader, build_downloader
from .resolver import ManifestResolver, load_manifest

__all__ = ["Downloader", "HelperProcessDownloader", "RequestsDownloader", "ManifestResolver", "build_downloader", "load_manifest"]
