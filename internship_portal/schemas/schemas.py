"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from enum import Enum


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class InsuranceStatus(str, Enum):
    incomplete = "incomplete"
    completed = "completed"


class BankAccountStatus(str, Enum):
    pending = "pending"
    verified = "verified"
    failed = "failed"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    aadhaar_number: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8)

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class UserSummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    insurance_status: str
    bank_account_status: str

class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserSummary


# ============================================================
# ACCOUNT SCHEMAS
# ============================================================

class InsuranceCompleteRequest(CamelModel):
    user_id: str
    policy_number: str = Field(..., min_length=1)

class InsuranceRecord(CamelModel):
    id: str
    user_id: str
    policy_number: str
    status: str
    documents: List[str] = []
    created_at: datetime

class DashboardUser(CamelModel):
    first_name: str
    last_name: str
    email: str
    insurance_status: str
    bank_account_status: str

class DashboardResponse(CamelModel):
    user: DashboardUser
    insurance: Optional[InsuranceRecord] = None

class BankVerificationRequest(CamelModel):
    user_id: str
    aadhaar_number: str

class BankVerificationResponse(CamelModel):
    message: str
    status: BankAccountStatus

class DeletedUser(CamelModel):
    name: str
    email: str

class DeleteUserResponse(CamelModel):
    message: str
    deleted_user: DeletedUser


# ============================================================
# RECOMMENDATION SCHEMAS
# ============================================================

class InternshipPreferences(CamelModel):
    """
    A requester's matching criteria.

    Set-valued fields default to empty so a partial body still scores.
    workMode / educationLevel left out never match anything.
    """
    technical_skills: List[str] = []
    soft_skills: List[str] = []
    preferred_cities: List[str] = []
    work_mode: Optional[str] = None
    sector_interest: List[str] = []
    education_level: Optional[str] = None
    field_of_study: Optional[str] = None
    cgpa: Optional[float] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None

class StoredPreferences(InternshipPreferences):
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class Internship(CamelModel):
    id: str
    title: str
    company: str
    location: str
    duration: str
    stipend: str
    description: str = ""
    required_skills: List[str] = []
    sector: str
    work_mode: str
    education_level: str

class ScoredInternship(Internship):
    score: int
    matching_skills: List[str] = []

class RecommendationResponse(CamelModel):
    message: str
    recommendations: List[ScoredInternship]

class InternshipListResponse(CamelModel):
    internships: List[Internship]
    total: int


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(CamelModel):
    message: str
