# application/http/request.py
from __future__ import annotations

import os
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qs

from pydantic import BaseModel, ConfigDict, Field


class Request(BaseModel):
    """Snapshot of the inbound request, taken from CGI/WSGI-style variables."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(default='GET')
    uri: str = Field(default='/')
    scheme: str = Field(default='http')
    host: Optional[str] = None
    remote_addr: Optional[str] = None
    query: Dict[str, list] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def capture(cls, environ: Optional[Mapping[str, str]] = None) -> 'Request':
        environ = os.environ if environ is None else environ

        headers = {
            key[5:].replace('_', '-').title(): value
            for key, value in environ.items()
            if key.startswith('HTTP_')
        }
        for key in ('CONTENT_TYPE', 'CONTENT_LENGTH'):
            if environ.get(key):
                headers[key.replace('_', '-').title()] = environ[key]

        uri = environ.get('REQUEST_URI') or environ.get('PATH_INFO') or '/'
        query_string = environ.get('QUERY_STRING') or (uri.split('?', 1)[1] if '?' in uri else '')
        https = str(environ.get('HTTPS', '')).lower() in ('on', '1')

        return cls(
            method=(environ.get('REQUEST_METHOD') or 'GET').upper(),
            uri=uri,
            scheme=environ.get('wsgi.url_scheme') or ('https' if https else 'http'),
            host=headers.get('Host') or environ.get('SERVER_NAME'),
            remote_addr=environ.get('REMOTE_ADDR'),
            query=parse_qs(query_string),
            headers=headers,
        )

    @property
    def path(self) -> str:
        return self.uri.split('?', 1)[0]

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.replace('_', '-').title(), default)

    def is_json(self) -> bool:
        return 'json' in (self.header('Content-Type') or '')
