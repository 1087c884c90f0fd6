"""Subnet calculation endpoints.

JSON counterpart of the HTML form: takes an IPv4 address and a subnet mask
and returns the derived network information.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..calculator import SubnetError, calculate_subnet
from ..models.subnet import SubnetCalculationRequest, SubnetResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/subnets", tags=["subnets"])


@router.post("/ipv4", response_model=SubnetResult)
async def calculate_ipv4_subnet(request: SubnetCalculationRequest):
    """Calculate IPv4 subnet information including the usable host range.

    Corner cases:
    - /31: RFC 3021 point-to-point link, no usable hosts reported
    - /32: Single host, network and broadcast equal the entered address

    Args:
        request: Subnet calculation request with address and mask

    Returns:
        Network, broadcast, host range and usable host count

    Raises:
        HTTPException: 400 if the address or mask is invalid
    """
    ip = request.ip.strip()
    mask = request.mask.strip()

    try:
        return calculate_subnet(ip, mask)
    except SubnetError as e:
        logger.info(
            "Rejected subnet calculation",
            extra={"error_type": type(e).__name__, "reason": str(e)},
        )
        raise HTTPException(status_code=400, detail=str(e)) from e
