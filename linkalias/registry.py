"""Alias registry: creation, lookup and expiry of short aliases."""

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional, Set, Union

from .config import Config
from .errors import (
    AliasNotFound,
    CodeSpaceExhausted,
    ErrorKind,
    ValidationError,
    ValidationFailed,
)
from .models import AliasRecord, CreationRequest
from .shortcode import ShortCodeGenerator
from .common.validators import is_valid_url, is_valid_validity, is_valid_short_code
from .common.url_builder import build_short_url


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AliasRegistry:
    """Owns every alias record and the index of occupied short codes.

    Records are kept in an insertion-ordered mapping keyed by code, which is
    also the uniqueness index. Expired records keep their code until a purge
    removes them. Every public operation holds the registry lock, so code
    generation, the uniqueness check and insertion are atomic, and a batch is
    committed as a whole.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the registry.

        Args:
            config: Registry configuration (defaults are used if omitted)
            short_code_generator: Optional short code generator
            clock: Callable returning the current time as an aware datetime
            logger: Optional logger
        """
        self.config = config or Config()
        self.generator = short_code_generator or ShortCodeGenerator(
            default_length=self.config.short_code_length
        )
        self.clock = clock or utc_now
        self.logger = logger or logging.getLogger(__name__)

        self._records: "OrderedDict[str, AliasRecord]" = OrderedDict()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._records

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, request: CreationRequest) -> List[ValidationError]:
        """Check a creation request.

        Args:
            request: The request to check

        Returns:
            Every violation found; an empty list means the request is valid
        """
        with self._lock:
            return self._validate(request, self._records.keys())

    def _validate(self, request: CreationRequest, occupied: Iterable[str]) -> List[ValidationError]:
        errors: List[ValidationError] = []

        url = request.original_url
        if url is None or (isinstance(url, str) and not url.strip()):
            errors.append(ValidationError(
                "original_url", ErrorKind.REQUIRED_FIELD, "Original URL is required",
            ))
        else:
            is_valid, error = is_valid_url(url)
            if not is_valid:
                errors.append(ValidationError("original_url", ErrorKind.MALFORMED_URL, error))

        if request.validity_minutes is not None:
            is_valid, error = is_valid_validity(request.validity_minutes, now=self.clock())
            if not is_valid:
                errors.append(ValidationError("validity_minutes", ErrorKind.INVALID_VALIDITY, error))

        code = request.custom_code
        if code:
            is_valid, error = is_valid_short_code(
                code,
                min_length=self.config.custom_code_min_length,
                max_length=self.config.custom_code_max_length,
            )
            if not is_valid:
                errors.append(ValidationError("custom_code", ErrorKind.INVALID_CODE_FORMAT, error))
            elif code in occupied:
                errors.append(ValidationError(
                    "custom_code", ErrorKind.CODE_ALREADY_IN_USE, "This short code is already in use",
                ))

        return errors

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create(self, request: CreationRequest) -> AliasRecord:
        """Create one alias.

        Args:
            request: The creation request

        Returns:
            The new record

        Raises:
            ValidationFailed: If the request is invalid; nothing is created
            CodeSpaceExhausted: If no free code could be generated
        """
        with self._lock:
            errors = self._validate(request, self._records.keys())
            if errors:
                self.logger.warning(
                    f"Rejected alias for {request.original_url!r}: {len(errors)} error(s)",
                    extra={"context": {"errors": [e.to_dict() for e in errors]}},
                )
                raise ValidationFailed(errors)

            return self._commit(request, reserved=set())

    def create_batch(self, requests: List[CreationRequest]) -> List[AliasRecord]:
        """Create several aliases, all or none.

        Every request is validated before anything is committed. Errors are
        tagged with the position of the request that produced them. Callers
        are expected to cap the batch at ``config.max_batch_size``.

        Args:
            requests: One or more creation requests

        Returns:
            The new records, in input order

        Raises:
            ValueError: If the batch is empty
            ValidationFailed: If any request is invalid; nothing is created
            CodeSpaceExhausted: If no free code could be generated
        """
        if not requests:
            raise ValueError("Batch must contain at least one request")

        with self._lock:
            self.logger.info(
                f"Shortening {len(requests)} URL(s)",
                extra={"context": {"count": len(requests)}},
            )

            errors: List[ValidationError] = []
            claimed: Set[str] = set()
            for index, request in enumerate(requests):
                request_errors = self._validate(request, self._records.keys())
                code = request.custom_code
                code_ok = not any(e.field == "custom_code" for e in request_errors)
                if code and code_ok and code in claimed:
                    request_errors.append(ValidationError(
                        "custom_code",
                        ErrorKind.CODE_ALREADY_IN_USE,
                        "This short code is already used earlier in the batch",
                    ))
                if code and code_ok:
                    claimed.add(code)
                errors.extend(error.with_index(index) for error in request_errors)

            if errors:
                self.logger.error(
                    f"Batch rejected: {len(errors)} validation error(s)",
                    extra={"context": {"errors": [e.to_dict() for e in errors]}},
                )
                raise ValidationFailed(errors)

            # Generated codes must not take a custom code a later request needs
            reserved = {r.custom_code for r in requests if r.custom_code}
            records = []
            try:
                for request in requests:
                    records.append(self._commit(request, reserved))
            except Exception:
                for record in records:
                    del self._records[record.code]
                if records:
                    self.logger.warning(
                        f"Batch rolled back: removed {len(records)} alias(es)",
                        extra={"context": {"rolled_back": [r.code for r in records]}},
                    )
                raise

            self.logger.info(
                f"Shortened {len(records)} URL(s)",
                extra={"context": {"codes": [r.code for r in records]}},
            )
            return records

    def _commit(self, request: CreationRequest, reserved: Set[str]) -> AliasRecord:
        if request.custom_code:
            code = request.custom_code
        else:
            code = self._generate_code(reserved)

        validity = request.validity_minutes
        if validity is None:
            validity = self.config.default_validity_minutes

        created_at = self.clock()
        record = AliasRecord(
            id=self._new_id(created_at),
            original_url=request.original_url.strip(),
            code=code,
            validity_minutes=validity,
            created_at=created_at,
            expires_at=created_at + timedelta(minutes=validity),
        )
        self._records[code] = record

        self.logger.info(
            f"Created alias: {code} -> {record.original_url}",
            extra={"context": {
                "code": code,
                "original_url": record.original_url,
                "expires_at": record.expires_at.isoformat(),
            }},
        )
        return record

    def _generate_code(self, reserved: Set[str]) -> str:
        def is_taken(candidate: str) -> bool:
            return candidate in self._records or candidate in reserved

        try:
            if self._generated_space_used(reserved) >= self.generator.capacity():
                raise CodeSpaceExhausted("Short code space is full")
            return self.generator.generate_unique(is_taken, self.config.max_collision_retries)
        except CodeSpaceExhausted as e:
            self.logger.error(
                f"Code generation failed: {e}",
                extra={"context": {"tracked": len(self._records)}},
            )
            raise

    def _generated_space_used(self, reserved: Set[str]) -> int:
        pending = [c for c in reserved if c not in self._records]
        if len(self._records) + len(pending) < self.generator.capacity():
            return len(self._records) + len(pending)

        # Near capacity: count only codes that fall inside the generated space
        length = self.generator.default_length

        def in_space(code: str) -> bool:
            return len(code) == length and self.generator.is_valid_format(code)

        return sum(1 for c in self._records if in_space(c)) + sum(1 for c in pending if in_space(c))

    @staticmethod
    def _new_id(created_at: datetime) -> str:
        return f"{int(created_at.timestamp() * 1000)}{uuid.uuid4().hex[:9]}"

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, code: str) -> Optional[AliasRecord]:
        """Look up a live alias.

        Expired aliases are reported as missing but are left in place.

        Args:
            code: The short code to lookup

        Returns:
            The record, or None if unknown or expired
        """
        with self._lock:
            record = self._records.get(code)
            now = self.clock()

        if record is None:
            self.logger.warning(f"Short code not found: {code}", extra={"context": {"code": code}})
            return None

        if record.is_expired(now):
            self.logger.warning(
                f"Attempted to access expired alias: {code}",
                extra={"context": {"code": code, "expires_at": record.expires_at.isoformat()}},
            )
            return None

        self.logger.debug(f"Resolved alias: {code} -> {record.original_url}")
        return record

    def redirect_target(self, code: str) -> str:
        """Return the URL a short code redirects to.

        Raises:
            AliasNotFound: If the code is unknown or expired
        """
        record = self.resolve(code)
        if record is None:
            raise AliasNotFound(code)

        self.logger.info(
            f"Redirecting {code} -> {record.original_url}",
            extra={"context": {"code": code, "original_url": record.original_url}},
        )
        return record.original_url

    def short_url(self, alias: Union[AliasRecord, str], origin: Optional[str] = None) -> str:
        """Render the display form ``{origin}/{code}``."""
        code = alias.code if isinstance(alias, AliasRecord) else alias
        return build_short_url(
            short_code=code,
            base_url=origin or self.config.base_url,
            path_prefix=self.config.path_prefix,
        )

    # ------------------------------------------------------------------
    # Listing and expiry
    # ------------------------------------------------------------------

    def list_live(self) -> List[AliasRecord]:
        """Purge expired aliases, then list the rest newest first."""
        with self._lock:
            self._purge(self.clock())
            return self._newest_first(self._records.values())

    def list_all(self) -> List[AliasRecord]:
        """List every tracked alias newest first, expired ones included."""
        with self._lock:
            return self._newest_first(self._records.values())

    def purge_expired(self) -> int:
        """Remove expired aliases and free their codes.

        Returns:
            Number of aliases removed
        """
        with self._lock:
            return self._purge(self.clock())

    def statistics(self) -> Dict[str, int]:
        """Count tracked, live and expired aliases without purging."""
        with self._lock:
            now = self.clock()
            expired = sum(1 for r in self._records.values() if r.is_expired(now))
            return {
                "total": len(self._records),
                "live": len(self._records) - expired,
                "expired": expired,
            }

    def reset(self) -> int:
        """Drop every alias.

        Returns:
            Number of aliases removed
        """
        with self._lock:
            removed = len(self._records)
            self._records.clear()

        self.logger.info(f"Registry reset: removed {removed} alias(es)", extra={"context": {"removed": removed}})
        return removed

    def _purge(self, now: datetime) -> int:
        expired = [code for code, record in self._records.items() if record.is_expired(now)]
        for code in expired:
            del self._records[code]

        if expired:
            self.logger.info(
                f"Cleared {len(expired)} expired alias(es)",
                extra={"context": {"removed": len(expired), "remaining": len(self._records)}},
            )
        return len(expired)

    @staticmethod
    def _newest_first(records: Iterable[AliasRecord]) -> List[AliasRecord]:
        # Stable sort over reversed insertion order: ties go to the later insert
        return sorted(reversed(list(records)), key=lambda r: r.created_at, reverse=True)
