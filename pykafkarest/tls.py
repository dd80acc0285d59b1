# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
TLS configuration for HTTPS connections to the REST proxy.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class TLSConfig:
    """
    TLS/SSL settings applied when the endpoint uses the ``https`` scheme.

    Security Levels:
    - System CA store: Server certificate validation (default)
    - Custom CA: Private PKI
    - Mutual TLS: Client + server certificates
    - Insecure TLS: Skip certificate verification (testing/debugging only)

    Examples:
        # Custom CA with client certificate
        >>> tls = TLSConfig(
        ...     ca_file="/path/to/ca.crt",
        ...     cert_file="/path/to/client.crt",
        ...     key_file="/path/to/client.key",
        ... )

        # Insecure TLS (skip certificate verification)
        >>> tls = TLSConfig(insecure_skip_verify=True)
    """

    ca_file: Optional[str] = None
    """Path to CA certificate bundle for server verification."""

    cert_file: Optional[str] = None
    """Path to client certificate file (for mutual TLS)."""

    key_file: Optional[str] = None
    """Path to client private key file (for mutual TLS)."""

    insecure_skip_verify: bool = False
    """Skip certificate verification (INSECURE - use only for testing)."""

    def verify(self) -> Union[bool, str]:
        """Value for ``requests.Session.verify``."""
        if self.insecure_skip_verify:
            return False
        return self.ca_file or True

    def cert(self) -> Union[str, tuple[str, str], None]:
        """Value for ``requests.Session.cert``."""
        if self.cert_file and self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file
