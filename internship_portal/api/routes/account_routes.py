"""
Account Routes

POST /complete-insurance - Mark insurance completed, store policy
GET /dashboard/{user_id} - User status and latest insurance record
POST /verify-bank-account - Simulated bank account verification
DELETE /delete-user/{user_id} - Delete account and related records

All routes need a bearer token for the same user.
"""

from fastapi import APIRouter, Depends

from internship_portal.api.deps import get_account_service
from internship_portal.core.auth import ensure_same_user, get_current_user_id
from internship_portal.services.account_service import AccountService
from internship_portal.schemas.schemas import (
    BankAccountStatus, BankVerificationRequest, BankVerificationResponse, DashboardResponse,
    DashboardUser, DeletedUser, DeleteUserResponse, InsuranceCompleteRequest, InsuranceRecord,
    MessageResponse
)

router = APIRouter(tags=["Account"])


@router.post("/complete-insurance", response_model=MessageResponse)
async def complete_insurance(
    request: InsuranceCompleteRequest,
    caller_id: str = Depends(get_current_user_id),
    accounts: AccountService = Depends(get_account_service),
):
    ensure_same_user(caller_id, request.user_id)
    accounts.complete_insurance(request.user_id, request.policy_number)
    return MessageResponse(message="Insurance process completed successfully")


@router.get("/dashboard/{user_id}", response_model=DashboardResponse)
async def dashboard(
    user_id: str,
    caller_id: str = Depends(get_current_user_id),
    accounts: AccountService = Depends(get_account_service),
):
    """Get user status plus the latest insurance record (null if none)."""
    ensure_same_user(caller_id, user_id)
    user, insurance = accounts.dashboard(user_id)

    record = None
    if insurance:
        record = InsuranceRecord(
            id=insurance["_id"],
            user_id=insurance["user_id"],
            policy_number=insurance["policy_number"],
            status=insurance["status"],
            documents=insurance.get("documents", []),
            created_at=insurance["created_at"],
        )

    return DashboardResponse(
        user=DashboardUser(
            first_name=user["first_name"],
            last_name=user["last_name"],
            email=user["email"],
            insurance_status=user["insurance_status"],
            bank_account_status=user["bank_account_status"],
        ),
        insurance=record,
    )


@router.post("/verify-bank-account", response_model=BankVerificationResponse)
async def verify_bank_account(
    request: BankVerificationRequest,
    caller_id: str = Depends(get_current_user_id),
    accounts: AccountService = Depends(get_account_service),
):
    """
    Simulated verification: succeeds when the Aadhaar number matches
    the one given at registration. A mismatch leaves the status as is.
    """
    ensure_same_user(caller_id, request.user_id)
    status = accounts.verify_bank_account(request.user_id, request.aadhaar_number)

    if status == BankAccountStatus.verified:
        return BankVerificationResponse(message="Bank account verified successfully", status=status)
    return BankVerificationResponse(message="Bank account verification failed", status=status)


@router.delete("/delete-user/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    caller_id: str = Depends(get_current_user_id),
    accounts: AccountService = Depends(get_account_service),
):
    ensure_same_user(caller_id, user_id)
    user = accounts.delete_user(user_id)
    return DeleteUserResponse(
        message="User account deleted successfully",
        deleted_user=DeletedUser(
            name=f"{user['first_name']} {user['last_name']}",
            email=user["email"],
        ),
    )
