"""
Account Service

Registration, login, insurance completion, dashboard, bank-account
verification and account deletion. Each operation is a short sequence
of document reads/writes; failures surface as domain errors.

Bank-account verification is a simulation: the Aadhaar number supplied
by the user is compared with the one given at registration. No bank
is contacted.
"""

import logging
from typing import Optional, Tuple

from internship_portal.core.auth import hash_password, verify_password
from internship_portal.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from internship_portal.db.store import Document
from internship_portal.schemas.schemas import BankAccountStatus, InsuranceStatus, RegisterRequest
from internship_portal.services.mongo_service import InsuranceService, PreferenceService, UserService

log = logging.getLogger(__name__)


class AccountService:

    def __init__(self, users: UserService, insurance: InsuranceService, preferences: PreferenceService):
        self.users = users
        self.insurance = insurance
        self.preferences = preferences

    def _require_user(self, user_id: str) -> Document:
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def register(self, data: RegisterRequest) -> Document:
        """Create a user. Raises ConflictError if the email is taken."""
        if self.users.get_by_email(data.email):
            raise ConflictError("User already exists")

        try:
            user = self.users.insert(
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                phone=data.phone,
                aadhaar_number=data.aadhaar_number,
                password_hash=hash_password(data.password),
            )
        except ConflictError:
            # lost a race with a concurrent registration (unique email index)
            raise ConflictError("User already exists")

        log.info("Registered user %s", user["_id"])
        return user

    def login(self, email: str, password: str) -> Document:
        user = self.users.get_by_email(email)
        if not user or not verify_password(password, user["password"]):
            log.warning("Failed login for %s", email)
            raise InvalidCredentialsError()
        return user

    def complete_insurance(self, user_id: str, policy_number: str) -> Document:
        """Mark insurance completed and record the policy."""
        self._require_user(user_id)
        self.users.set_fields(user_id, insurance_status=InsuranceStatus.completed.value)
        record = self.insurance.insert(user_id, policy_number, status="active")
        log.info("Insurance completed for user %s", user_id)
        return record

    def dashboard(self, user_id: str) -> Tuple[Document, Optional[Document]]:
        """User document and their latest insurance record (or None)."""
        user = self._require_user(user_id)
        return user, self.insurance.get_latest_by_user(user_id)

    def verify_bank_account(self, user_id: str, aadhaar_number: str) -> BankAccountStatus:
        user = self._require_user(user_id)

        if user["aadhaar_number"] != aadhaar_number:
            log.info("Bank account verification failed for user %s", user_id)
            return BankAccountStatus.failed

        self.users.set_fields(user_id, bank_account_status=BankAccountStatus.verified.value)
        log.info("Bank account verified for user %s", user_id)
        return BankAccountStatus.verified

    def delete_user(self, user_id: str) -> Document:
        """Delete the user and everything stored for them. Returns the deleted user."""
        user = self._require_user(user_id)

        self.insurance.delete_by_user(user_id)
        self.preferences.delete_by_user(user_id)
        self.users.delete(user_id)

        log.info("Deleted user %s", user_id)
        return user
