"""Default category catalog for the HR reference-data console.

Adding or removing a category here is all that is needed; the orchestrator
never names a category.
"""

from refsearch.contracts.reference_search_v1 import (
    CategoryDescriptor,
    FieldMap,
    RemoteSource,
    StaticSource,
)
from refsearch.search.reference_data import COUNTRIES, LANGUAGES
from refsearch.search.registry import CategoryRegistry

# (category key, label) pairs from the lookup_values.category enum that are
# browsable from the lookups screen.
LOOKUP_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("employee_status", "Employee Statuses"),
    ("employee_type", "Employee Types"),
    ("termination_reason", "Termination Reasons"),
    ("leave_type", "Leave Types"),
    ("contract_type", "Contract Types"),
    ("transaction_type", "Transaction Types"),
    ("employment_action", "Employment Actions"),
    ("hire_type", "Hire Types"),
    ("promotion_reason", "Promotion Reasons"),
    ("transfer_reason", "Transfer Reasons"),
    ("payment_frequency", "Payment Frequencies"),
)

_WITH_DESCRIPTION = FieldMap(extra="description")


def _org_table(key: str, label: str, target: str, table: str | None = None) -> CategoryDescriptor:
    return CategoryDescriptor(
        key=key,
        label=label,
        navigation_target=target,
        match_fields=("code", "name", "extra"),
        field_map=_WITH_DESCRIPTION,
        source=RemoteSource(table=table or key, order_column="name"),
    )


def _lookup(category: str, label: str) -> CategoryDescriptor:
    return CategoryDescriptor(
        key=f"lookup_{category}",
        label=label,
        navigation_target="lookups",
        match_fields=("code", "name", "extra"),
        field_map=_WITH_DESCRIPTION,
        source=RemoteSource(
            table="lookup_values",
            eq_filters={"category": category},
            order_column="display_order",
        ),
    )


DEFAULT_CATEGORIES: tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(
        key="countries",
        label="Countries",
        is_editable=False,
        navigation_target="countries",
        source=StaticSource(records=COUNTRIES),
    ),
    CategoryDescriptor(
        key="currencies",
        label="Currencies",
        navigation_target="currencies",
        match_fields=("code", "name", "extra"),
        field_map=FieldMap(extra="symbol"),
        source=RemoteSource(table="currencies", order_column="code"),
    ),
    CategoryDescriptor(
        key="languages",
        label="Languages",
        is_editable=False,
        navigation_target="languages",
        source=StaticSource(records=LANGUAGES),
    ),
    _org_table("company_groups", "Company Groups", "company-groups"),
    _org_table("divisions", "Divisions", "divisions"),
    CategoryDescriptor(
        key="companies",
        label="Companies",
        navigation_target="companies",
        match_fields=("code", "name", "extra"),
        field_map=FieldMap(extra="industry"),
        source=RemoteSource(table="companies", order_column="name"),
    ),
    _org_table("company_divisions", "Company Divisions", "company-divisions"),
    _org_table("departments", "Departments", "departments"),
    _org_table("sections", "Sections", "sections"),
    _org_table("job_families", "Job Families", "job-families"),
    _org_table("jobs", "Jobs", "jobs"),
    CategoryDescriptor(
        key="positions",
        label="Positions",
        navigation_target="positions",
        match_fields=("code", "name", "extra"),
        field_map=FieldMap(name="title", extra="description"),
        source=RemoteSource(table="positions", order_column="title"),
    ),
    _org_table("salary_grades", "Salary Grades", "salary-grades"),
    *(_lookup(category, label) for category, label in LOOKUP_CATEGORIES),
)


def default_registry() -> CategoryRegistry:
    return CategoryRegistry(DEFAULT_CATEGORIES)
