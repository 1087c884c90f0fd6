"""Pydantic models for the subnet calculator."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SubnetCalculationRequest(BaseModel):
    """Request model for IPv4 subnet calculation."""

    ip: str = Field(..., description="IPv4 address (e.g., 192.168.1.100)")
    mask: str = Field(..., description="Subnet mask as CIDR (e.g., /24) or dotted decimal (e.g., 255.255.255.0)")


class SubnetResult(BaseModel):
    """Derived values for an IPv4 address and subnet mask.

    Host addresses are "N/A" for /31 and /32 subnets.
    """

    model_config = ConfigDict(frozen=True)

    network_address: str
    broadcast_address: str
    min_host_address: str
    max_host_address: str
    usable_hosts: str
    prefix_length: int
    netmask: str


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str
    timestamp: datetime
    version: str
    uptime: str
