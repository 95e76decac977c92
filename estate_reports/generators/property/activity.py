"""Inquiry and notice generators."""

from datetime import datetime, timedelta

from estate_reports.generators.base import BaseGenerator
from estate_reports.models.property import (
    Inquiry,
    InquiryStatus,
    InquiryType,
    Notice,
    NoticeStatus,
    NoticeType,
    Tenant,
    Unit,
)


class InquiryGenerator(BaseGenerator):
    """Generate prospect inquiries about listings."""

    TYPES = list(InquiryType)
    TYPE_WEIGHTS = [0.35, 0.30, 0.10, 0.10, 0.15]
    STATUSES = list(InquiryStatus)
    STATUS_WEIGHTS = [0.25, 0.20, 0.15, 0.25, 0.15]

    def generate(self, unit: Unit, start: datetime, end: datetime) -> Inquiry:
        inquiry_type = self.rng.choices(self.TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        return Inquiry(
            inquiry_id=self.new_id(),
            account_id=unit.account_id,
            inquiry_type=inquiry_type,
            status=self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            created_at=self.moment_between(start, end),
            unit_id=unit.unit_id,
            name=self.fake.name(),
            subject=f"{inquiry_type.value.capitalize()} request: {unit.title}",
        )


class NoticeGenerator(BaseGenerator):
    """Generate notices issued to tenants."""

    TYPES = list(NoticeType)
    STATUSES = list(NoticeStatus)
    STATUS_WEIGHTS = [0.25, 0.25, 0.15, 0.05, 0.30]

    def generate(self, tenant: Tenant, as_of: datetime, history_days: int = 180) -> Notice:
        notice_type = self.rng.choice(self.TYPES)
        issued = (as_of - timedelta(days=self.rng.randint(0, history_days))).date()
        return Notice(
            notice_id=self.new_id(),
            account_id=tenant.account_id,
            notice_type=notice_type,
            status=self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            date_issued=issued,
            tenant_id=tenant.tenant_id,
            unit_id=tenant.unit_id,
            description=f"{notice_type.value.replace('-', ' ').capitalize()} notice for {tenant.name}",
        )
