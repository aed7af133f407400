from typing import List, Optional

from pydantic import Field, StrictStr

from oeq_types.common import OeqModel


class DrmParties(OeqModel):
    title: StrictStr = Field(description="Server side language string for DRM party")
    party_list: List[StrictStr] = Field(description="Each party's name and email")


class DrmCustomTerms(OeqModel):
    title: StrictStr = Field(description="Server side language string for DRM terms")
    terms: StrictStr = Field(description="Terms of using the item")


class DrmAgreements(OeqModel):
    regular_permission: Optional[StrictStr] = Field(None, description="Regular permissions granted to the user")
    additional_permission: Optional[StrictStr] = Field(None, description="Additional permissions granted to the user")
    education_sector: Optional[StrictStr] = Field(None, description="Use limited to the education sector")
    parties: Optional[DrmParties] = None
    custom_terms: Optional[DrmCustomTerms] = None


class ItemDrmDetails(OeqModel):
    """Everything a user must accept before using a DRM protected item."""

    title: StrictStr = Field(description="DRM acceptance title")
    subtitle: StrictStr = Field(description="DRM acceptance subtitle")
    description: StrictStr = Field(description="DRM acceptance description")
    agreements: DrmAgreements
