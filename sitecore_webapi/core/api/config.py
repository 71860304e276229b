"""
Data context configuration module.

Provides configuration for the HTTP layer used by data contexts.
Open for extension through custom configurations.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple, Union


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_proxy_url(self) -> Optional[str]:
        """Proxy URL with credentials inserted."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url

    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to the ``proxies`` mapping used by requests."""
        url = self.to_proxy_url()
        if not url:
            return None
        return {'http': url, 'https': url}


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    Allows customization of certificate verification.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None

    def to_requests_verify(self) -> Union[bool, str]:
        """Value for the ``verify`` argument of requests."""
        if not self.verify:
            return False
        return self.ca_file or True

    def to_requests_cert(self) -> Optional[Union[str, Tuple[str, str]]]:
        """Value for the ``cert`` argument of requests."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    ``None`` leaves the transport default in place (wait indefinitely).
    """
    connect: Optional[float] = None
    read: Optional[float] = None

    def to_requests_timeout(self) -> Optional[Tuple[Optional[float], Optional[float]]]:
        """Value for the ``timeout`` argument of requests."""
        if self.connect is None and self.read is None:
            return None
        return (self.connect, self.read)


@dataclass
class ContextConfig:
    """
    Complete data context configuration.

    Centralizes the HTTP options shared by every request a context sends.
    """
    # User agent
    user_agent: str = 'sitecore-webapi/1.0.0'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Request logger level; None leaves it unchanged
    log_level: Optional[int] = None

    @classmethod
    def default(cls) -> 'ContextConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'ContextConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'ContextConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False),
            **kwargs
        )

    def get_session_headers(self) -> Dict[str, str]:
        """Default headers for the HTTP session."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

    def get_send_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for ``requests.Session.send``."""
        kwargs: Dict[str, Any] = {
            'timeout': self.timeout.to_requests_timeout(),
            'verify': self.ssl.to_requests_verify(),
            'allow_redirects': True,
        }
        cert = self.ssl.to_requests_cert()
        if cert:
            kwargs['cert'] = cert
        proxies = self.proxy.to_requests_proxies() if self.proxy else None
        if proxies:
            kwargs['proxies'] = proxies
        return kwargs
