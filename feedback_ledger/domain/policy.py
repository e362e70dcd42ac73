from feedback_ledger.domain.entities import Link, Principal

DEFAULT_REDACTED_CONTENT = b"Private feedback"


class VisibilityPolicy:
    """
    Privacy rules applied by submissions and read projections.

    A non-admin never sees content belonging to a private link, except their
    own submissions through the submitter-filtered listing.
    """

    def __init__(
        self,
        redacted_content: bytes = DEFAULT_REDACTED_CONTENT,
        gate_list_feedbacks: bool = False,
    ):
        self.redacted_content = redacted_content
        self.gate_list_feedbacks = gate_list_feedbacks

    def can_submit(self, link: Link, caller_is_admin: bool) -> bool:
        # Private links accept submissions from admins only, creators included
        return not link.is_private or caller_is_admin

    def can_read_content(self, link: Link, caller_is_admin: bool) -> bool:
        return not link.is_private or caller_is_admin

    def can_list_feedback_ids(self, link: Link, caller_is_admin: bool) -> bool:
        if not link.is_active:
            return False
        return self.can_read_content(link, caller_is_admin)

    def can_list_submissions(
        self,
        link: Link,
        caller: Principal,
        submitter: Principal,
        caller_is_admin: bool,
    ) -> bool:
        if link.is_deleted:
            return False
        if link.is_private:
            return caller_is_admin or caller == submitter
        return True

    def can_list_feedbacks(self, link: Link, caller_is_admin: bool) -> bool:
        if not self.gate_list_feedbacks:
            return True
        return self.can_read_content(link, caller_is_admin)

    def redact(self, link: Link, content: bytes, caller_is_admin: bool) -> bytes:
        if self.can_read_content(link, caller_is_admin):
            return content
        return self.redacted_content
