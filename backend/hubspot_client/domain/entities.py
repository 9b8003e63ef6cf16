"""HubSpot entity schemas (Pydantic v2).

Wire names are pydantic aliases. The route a resource lives under is a
field marked with ``RouteMetadata``; it is never mapped to or from a
document.
"""
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RouteMetadata:
    """Marks the field holding the resource's API route."""

    def __repr__(self) -> str:
        return "RouteMetadata()"


class HubSpotEntity(BaseModel):
    """Base class for entity and list-response schemas."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    route_base_path: Annotated[str, RouteMetadata()] = Field(
        default="", description="API route of the resource"
    )


# ============================================================================
# Entities
# ============================================================================

class Contact(HubSpotEntity):
    """Contact resource (v1 route)."""
    route_base_path: Annotated[str, RouteMetadata()] = "/contacts/v1/contact"

    vid: Optional[int] = Field(None, description="Contact id")
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstname")
    last_name: Optional[str] = Field(None, alias="lastname")
    website: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class Company(HubSpotEntity):
    """Company resource (v2 route)."""
    route_base_path: Annotated[str, RouteMetadata()] = "/companies/v2/companies"

    company_id: Optional[int] = Field(None, alias="companyId")
    name: Optional[str] = None
    domain: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    industry: Optional[str] = None
    is_public: Optional[bool] = None


class Deal(HubSpotEntity):
    """Deal resource (v1 route)."""
    route_base_path: Annotated[str, RouteMetadata()] = "/deals/v1/deal"

    deal_id: Optional[int] = Field(None, alias="dealId")
    name: Optional[str] = Field(None, alias="dealname")
    stage: Optional[str] = Field(None, alias="dealstage")
    pipeline: Optional[str] = None
    owner_id: Optional[int] = Field(None, alias="hubspot_owner_id")
    close_date: Optional[str] = Field(None, alias="closedate")
    amount: Optional[float] = None
    deal_type: Optional[str] = Field(None, alias="dealtype")


# ============================================================================
# List responses
# ============================================================================

class ContactList(HubSpotEntity):
    """Response of the "all contacts" endpoint."""
    route_base_path: Annotated[str, RouteMetadata()] = "/contacts/v1/lists/all/contacts/all"

    contacts: List[Contact] = Field(default_factory=list)
    has_more: bool = Field(False, alias="has-more")
    vid_offset: Optional[int] = Field(None, alias="vid-offset")


class CompanyList(HubSpotEntity):
    """Response of the paged companies endpoint."""
    route_base_path: Annotated[str, RouteMetadata()] = "/companies/v2/companies/paged"

    companies: List[Company] = Field(default_factory=list)
    has_more: bool = Field(False, alias="has-more")
    offset: Optional[int] = None


class DealList(HubSpotEntity):
    """Response of the paged deals endpoint."""
    route_base_path: Annotated[str, RouteMetadata()] = "/deals/v1/deal/paged"

    deals: List[Deal] = Field(default_factory=list)
    has_more: bool = Field(False, alias="hasMore")
    offset: Optional[int] = None
