"""
Data models for environment proxy resolution.
"""
from typing import Optional, Tuple
from urllib.parse import quote
from pydantic import BaseModel, ConfigDict, Field


class ProxyCredentials(BaseModel):
    """Percent-decoded user-info taken from a proxy URI."""
    model_config = ConfigDict(frozen=True)

    username: str = Field(description="Proxy user name")
    password: str = Field(default="", repr=False, description="Proxy password")

    def as_tuple(self) -> Tuple[str, str]:
        return (self.username, self.password)


class ProxyDescriptor(BaseModel):
    """Resolved proxy for one URL scheme.

    ``address`` always uses the target scheme the proxy was configured for;
    ``proxy_scheme`` keeps the scheme the environment value carried, which
    is how clients actually dial the proxy.
    """
    model_config = ConfigDict(frozen=True)

    scheme: str = Field(description="Target URL scheme this proxy serves")
    proxy_scheme: str = Field(default="http", description="Scheme the proxy itself is reached with")
    host: str = Field(description="Proxy hostname or IP address")
    port: int = Field(description="Proxy port")
    credentials: Optional[ProxyCredentials] = Field(default=None, description="Proxy credentials")
    bypass_list: Tuple[str, ...] = Field(default=(), description="Hosts reached without the proxy")
    bypass_on_local: bool = Field(default=True, description="Whether loopback hosts skip the proxy")

    @property
    def authority(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    @property
    def address(self) -> str:
        """Proxy address without credentials, e.g. ``http://proxy:8080``."""
        return f"{self.scheme}://{self.authority}"

    @property
    def connection_url(self) -> str:
        """URL a client dials to reach the proxy, e.g. ``http://proxy:3128``."""
        return f"{self.proxy_scheme}://{self.authority}"

    @property
    def proxy_url(self) -> str:
        """Connection URL with percent-encoded credentials embedded."""
        if self.credentials is None:
            return self.connection_url
        user = quote(self.credentials.username, safe="")
        password = quote(self.credentials.password, safe="")
        return f"{self.proxy_scheme}://{user}:{password}@{self.authority}"
