"""Property management generators."""

from estate_reports.generators.property.activity import InquiryGenerator, NoticeGenerator
from estate_reports.generators.property.building import BuildingGenerator
from estate_reports.generators.property.transaction import TransactionGenerator
from estate_reports.generators.property.unit import ListingViewGenerator, UnitGenerator
from estate_reports.generators.property.tenant import TenantGenerator
from estate_reports.generators.property.wallet import AdGenerator, WalletGenerator

__all__ = [
    "AdGenerator",
    "BuildingGenerator",
    "InquiryGenerator",
    "ListingViewGenerator",
    "NoticeGenerator",
    "TenantGenerator",
    "TransactionGenerator",
    "UnitGenerator",
    "WalletGenerator",
]
