"""
HTTP transport shared by the auth handshake and the preferences calls

Wraps a requests.Session so every Riot call goes through one place:
default headers, the per-host Host header, optional DNS pinning and
conversion of requests failures into TransportError.
"""

import socket
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

import requests
import urllib3

from config import USER_AGENT, CopierConfig
from errors import TransportError

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept-Encoding": "gzip, deflate",
    "User-Agent": USER_AGENT,
}


def resolve_authority(host: str, port: int = 443) -> str:
    """Resolve host once and return the address as a URL authority"""
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except OSError as e:
        raise TransportError(f"could not resolve {host}: {e}") from e
    if not infos:
        raise TransportError(f"could not resolve {host}: no addresses")

    family, _, _, _, sockaddr = infos[0]
    address = sockaddr[0]
    if family == socket.AF_INET6:
        address = f"[{address}]"
    return f"{address}:{port}"


class RiotTransport:
    """One account's HTTP client: headers and cookies are never shared"""

    def __init__(self, config: Optional[CopierConfig] = None, http: Optional[requests.Session] = None):
        self.config = config or CopierConfig()
        self.http = http if http is not None else requests.Session()
        self.http.headers.update(DEFAULT_HEADERS)
        self._pinned: Dict[str, str] = {}

        if self.config.insecure_transport:
            self.http.verify = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def set_header(self, name: str, value: str):
        """Attach a header to every later request"""
        self.http.headers[name] = value

    def _target(self, url: str) -> str:
        """Rewrite url to the pinned address when the insecure variant is on"""
        if not self.config.insecure_transport:
            return url

        parts = urlsplit(url)
        host = parts.hostname
        if host not in self._pinned:
            self._pinned[host] = resolve_authority(host, parts.port or 443)
        return urlunsplit(parts._replace(netloc=self._pinned[host]))

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send one request, turning any requests failure into TransportError"""
        host = urlsplit(url).hostname
        headers = dict(kwargs.pop("headers", None) or {})
        headers["Host"] = host
        if self.config.timeout is not None:
            kwargs.setdefault("timeout", self.config.timeout)

        try:
            return self.http.request(method, self._target(url), headers=headers, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e

    def close(self):
        self.http.close()
