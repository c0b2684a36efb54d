from services.submissions import SubmissionService


def create_submission_service(http_client) -> SubmissionService:
    """Factory function to create submission service with all dependencies."""
    from infrastructure.codeforces_client import CodeforcesApiClient
    from infrastructure.parsers import SubmissionListParser

    api_client = CodeforcesApiClient(http_client)

    return SubmissionService(
        api_client=api_client,
        list_parser=SubmissionListParser(),
    )


__all__ = ["SubmissionService", "create_submission_service"]
