"""Default Project Information Sheet (PIS) template."""

from functools import lru_cache

from intake_readiness.core.readiness.types import IntakeTemplate

WORK_TYPE_OPTIONS = [
    "Architectural", "Structural", "Mechanical", "Plumbing", "Sprinkler",
    "Fire Alarm", "Fire Suppression", "Standpipe", "Fuel Burning", "Boiler",
    "Fuel Storage", "Curb Cut", "Other",
]

YES_NO = ["Yes", "No"]

DEFAULT_PIS_SECTIONS: list[dict] = [
    {
        "id": "building_and_scope",
        "title": "Building Details & Scope of Work",
        "description": "Verify the property info and enter costs for each applicable work type",
        "fields": [
            {"id": "project_address", "label": "Project Address", "type": "text", "required": True},
            {"id": "borough", "label": "Borough", "type": "text"},
            {"id": "block", "label": "Block", "type": "text"},
            {"id": "lot", "label": "Lot", "type": "text"},
            {"id": "floors", "label": "Floor(s)", "type": "text"},
            {"id": "apt_numbers", "label": "Apt #(s)", "type": "text"},
            {"id": "sq_ft", "label": "Area (sq ft)", "type": "number"},
            {"id": "scope_heading", "label": "Scope of Work & Cost Breakdown", "type": "heading"},
            {"id": "job_description", "label": "Job Description", "type": "textarea", "required": True},
            {"id": "work_types", "label": "Select Applicable Work Types", "type": "work_type_picker",
             "options": WORK_TYPE_OPTIONS},
            {"id": "directive_14", "label": "Directive 14?", "type": "select", "options": YES_NO},
            {"id": "plans_upload", "label": "Upload Plans / Drawings", "type": "file_upload",
             "accept": ".pdf,.dwg,.dxf,.jpg,.jpeg,.png", "maxFiles": 10},
        ],
    },
    {
        "id": "applicant_and_owner",
        "title": "Applicant & Building Owner",
        "description": "Licensed professional and building owner details",
        "repeatable": False,
        "fields": [
            {"id": "applicant_heading", "label": "Applicant (Architect / Engineer)", "type": "heading"},
            {"id": "applicant_name", "label": "Full Name", "type": "text", "required": True},
            {"id": "applicant_business_name", "label": "Business Name", "type": "text"},
            {"id": "applicant_business_address", "label": "Business Address", "type": "text"},
            {"id": "applicant_phone", "label": "Phone", "type": "phone"},
            {"id": "applicant_email", "label": "Email", "type": "email"},
            {"id": "applicant_nys_lic", "label": "NYS License #", "type": "text"},
            {"id": "applicant_lic_type", "label": "License Type", "type": "select", "options": ["RA", "PE"]},
            {"id": "applicant_work_types", "label": "Work Types", "type": "checkbox_group", "options": []},
            {"id": "owner_heading", "label": "Building Owner", "type": "heading"},
            {"id": "ownership_type", "label": "Ownership Type", "type": "select",
             "options": ["Individual", "Corporation", "Partnership", "Condo/Co-op", "Non-profit", "Government"]},
            {"id": "non_profit", "label": "Non-Profit?", "type": "select", "options": YES_NO},
            {"id": "owner_name", "label": "Owner Name", "type": "text", "required": True},
            {"id": "owner_title", "label": "Title", "type": "text"},
            {"id": "owner_company", "label": "Company / Entity Name", "type": "text"},
            {"id": "owner_address", "label": "Address", "type": "text"},
            {"id": "owner_email", "label": "Email", "type": "email"},
            {"id": "owner_phone", "label": "Phone", "type": "phone"},
            {"id": "corp_officer_heading", "label": "Corporate Officer (if Corp/Partnership)", "type": "heading"},
            {"id": "corp_officer_name", "label": "Officer Name", "type": "text"},
            {"id": "corp_officer_title", "label": "Officer Title", "type": "text"},
        ],
    },
    {
        "id": "contractors_inspections",
        "title": "GC, TPP & Special Inspections",
        "description": "Check 'Same as Applicant' to auto-fill from above",
        "fields": [
            {"id": "gc_heading", "label": "General Contractor", "type": "heading"},
            {"id": "gc_same_as", "label": "Same as Applicant", "type": "checkbox"},
            {"id": "gc_name", "label": "Name", "type": "text"},
            {"id": "gc_company", "label": "Company", "type": "text"},
            {"id": "gc_phone", "label": "Phone", "type": "phone"},
            {"id": "gc_email", "label": "Email", "type": "email"},
            {"id": "gc_address", "label": "Address", "type": "text"},
            {"id": "gc_dob_tracking", "label": "DOB Tracking #", "type": "text"},
            {"id": "gc_hic_lic", "label": "HIC License #", "type": "text"},
            {"id": "tpp_heading", "label": "TPP Applicant", "type": "heading"},
            {"id": "tpp_same_as", "label": "Same as Applicant", "type": "checkbox"},
            {"id": "tpp_name", "label": "Name", "type": "text"},
            {"id": "tpp_email", "label": "Email", "type": "email"},
            {"id": "rent_controlled", "label": "Rent Controlled?", "type": "select", "options": YES_NO},
            {"id": "rent_stabilized", "label": "Rent Stabilized?", "type": "select", "options": YES_NO},
            {"id": "units_occupied", "label": "Occupied Units", "type": "number"},
            {"id": "sia_heading", "label": "Special Inspections (SIA)", "type": "heading"},
            {"id": "sia_same_as", "label": "Same as Applicant", "type": "checkbox"},
            {"id": "sia_name", "label": "Name", "type": "text"},
            {"id": "sia_company", "label": "Company", "type": "text"},
            {"id": "sia_phone", "label": "Phone", "type": "phone"},
            {"id": "sia_email", "label": "Email", "type": "email"},
            {"id": "sia_number", "label": "SIA #", "type": "text"},
            {"id": "sia_nys_lic", "label": "NYS License #", "type": "text"},
        ],
    },
]


@lru_cache
def _default_template() -> IntakeTemplate:
    return IntakeTemplate(id="default_pis", name="Project Information Sheet", sections=DEFAULT_PIS_SECTIONS)


def default_pis_template() -> IntakeTemplate:
    """Fresh copy of the default PIS template."""
    return _default_template().model_copy(deep=True)
