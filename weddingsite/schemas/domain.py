from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DnsRecordInfo(BaseModel):
    type: str
    records: List[str]


class DomainVerifyResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    verified: bool
    message: str
    dns_info: List[DnsRecordInfo] = Field(default_factory=list, alias="dnsInfo")


class DomainLookupResult(BaseModel):
    subdomain: str
