"""
DNS verification for custom domains.

A couple's domain is "verified" once it routes to our edge:

    # apex domain (example.com) → A record
    example.com           A      76.76.21.21

    # anything else (wedding.example.com) → CNAME
    wedding.example.com   CNAME  cname.vercel-dns.com

Checks run on demand from the domain settings page ("check again") and are
never cached.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import dns.exception
import dns.resolver

from weddingsite.config import settings

logger = logging.getLogger("weddingsite.domain.verification")

MSG_VERIFIED = "Domain is properly configured!"
MSG_NOT_FOUND = (
    "DNS records not found. Please add the required DNS records "
    "and wait for propagation."
)
MSG_TIMEOUT = "DNS lookup timed out. Please try again in a few minutes."


class DomainVerificationError(RuntimeError):
    """DNS resolution failed for a reason other than missing records."""


@dataclass
class DomainVerificationResult:
    domain: str
    verified: bool
    record_type: str
    message: str
    observed_values: List[str] = field(default_factory=list)

    @property
    def dns_info(self) -> List[Dict[str, Any]]:
        if not self.observed_values:
            return []
        return [{"type": self.record_type, "records": list(self.observed_values)}]


def is_apex_domain(domain: str) -> bool:
    """example.com is apex; wedding.example.com and a.b.example.com are not."""
    return len(domain.strip().rstrip(".").split(".")) == 2


def expected_record_type(domain: str) -> str:
    return "A" if is_apex_domain(domain) else "CNAME"


class DomainVerifier:
    """Checks whether a domain's DNS points at the platform edge."""

    def __init__(
        self,
        resolver: Optional[dns.resolver.Resolver] = None,
        edge_ip: Optional[str] = None,
        edge_cname: Optional[str] = None,
        provider_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.edge_ip = edge_ip or settings.EDGE_A_RECORD_IP
        self.edge_cname = (edge_cname or settings.EDGE_CNAME_TARGET).lower()
        self.provider_name = provider_name or settings.EDGE_PROVIDER_NAME
        self.timeout = timeout if timeout is not None else settings.DNS_TIMEOUT_SECONDS
        self._resolver = resolver

    def _get_resolver(self) -> dns.resolver.Resolver:
        # Built lazily: reading resolv.conf can fail on hosts without one
        if self._resolver is None:
            resolver = dns.resolver.Resolver()
            resolver.lifetime = self.timeout
            self._resolver = resolver
        return self._resolver

    def _query(self, domain: str, record_type: str) -> List[str]:
        answer = self._get_resolver().resolve(domain, record_type)
        if record_type == "A":
            return [str(rdata.address) for rdata in answer]
        return [str(rdata.target).rstrip(".").lower() for rdata in answer]

    def _matches(self, record_type: str, values: List[str]) -> bool:
        if record_type == "A":
            return self.edge_ip in values
        return any(self.edge_cname in value for value in values)

    def verify(self, domain: str) -> DomainVerificationResult:
        domain = domain.strip().lower().rstrip(".")
        record_type = expected_record_type(domain)

        try:
            values = self._query(domain, record_type)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            logger.info("No %s records for %s yet", record_type, domain)
            return DomainVerificationResult(
                domain=domain, verified=False, record_type=record_type, message=MSG_NOT_FOUND,
            )
        except dns.exception.Timeout:
            logger.warning("DNS %s lookup for %s timed out after %.1fs", record_type, domain, self.timeout)
            return DomainVerificationResult(
                domain=domain, verified=False, record_type=record_type, message=MSG_TIMEOUT,
            )
        except dns.exception.DNSException as exc:
            raise DomainVerificationError(
                f"DNS {record_type} lookup failed for {domain}: {exc}"
            ) from exc

        verified = self._matches(record_type, values)
        if verified:
            message = MSG_VERIFIED
        else:
            message = (
                f"DNS records found but not pointing to {self.provider_name}. "
                "Please verify your configuration."
            )
        logger.info("Domain %s %s check: verified=%s records=%s", domain, record_type, verified, values)
        return DomainVerificationResult(
            domain=domain,
            verified=verified,
            record_type=record_type,
            message=message,
            observed_values=values,
        )


def get_domain_verifier() -> DomainVerifier:
    """FastAPI dependency; overridden in tests with a fake resolver."""
    return DomainVerifier()
