"""GitHub REST API client with connection reuse and retry logic."""

import logging
from datetime import datetime, timedelta
from typing import Optional, Dict, Any, List, Tuple

import requests
from dateutil.parser import isoparse
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
    before_sleep_log
)

from core.exceptions import UpstreamServiceException
from core.github.models import Repository, ActivityDay
from core.utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


def _is_retryable_error(exc: Exception) -> bool:
    """
    Determine if an exception is retryable.

    Only retries on:
    - Timeouts
    - Server errors (5xx)
    - Connection errors without a response

    Does NOT retry on client errors (4xx).
    """
    if isinstance(exc, requests.Timeout):
        return True

    if isinstance(exc, requests.HTTPError):
        response = getattr(exc, 'response', None)
        if response is not None:
            return response.status_code >= 500
        return True

    if isinstance(exc, requests.RequestException):
        response = getattr(exc, 'response', None)
        if response is not None and 400 <= response.status_code < 500:
            return False
        return True

    return False


class GitHubClient:
    """
    Client for the GitHub REST API, authenticated as the candidate.

    Responsibilities:
    - Own a requests.Session for connection reuse
    - Page through the user's repositories
    - Enrich each repository with languages, README presence and the number of
      commits authored by the user
    - Build the recent push-activity graph
    """

    def __init__(
        self,
        access_token: str,
        api_url: Optional[str] = None,
        per_page: int = 100,
        max_commit_pages: int = 3,
        request_timeout_seconds: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = (api_url or DEFAULT_API_URL).rstrip('/')
        self.per_page = per_page
        self.max_commit_pages = max_commit_pages
        self.request_timeout_seconds = request_timeout_seconds

        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'Authorization': f'Bearer {access_token}',
            'X-GitHub-Api-Version': '2022-11-28',
        })

        logger.info(f"GitHubClient initialized: api_url={self.api_url}")

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception(_is_retryable_error),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """GET a path. 5xx responses raise so they can be retried; 4xx are returned."""
        response = self.session.get(
            f"{self.api_url}{path}",
            params=params,
            timeout=self.request_timeout_seconds
        )
        if response.status_code >= 500:
            response.raise_for_status()
        return response

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = self._request(path, params)
        response.raise_for_status()
        return response.json()

    def get_authenticated_user(self) -> Dict[str, Any]:
        """Profile of the token owner (login, html_url, avatar_url, bio)."""
        return self._get_json("/user")

    def list_repositories(self) -> List[Dict[str, Any]]:
        """All repositories visible to the user, most recently updated first."""
        repos: List[Dict[str, Any]] = []
        page = 1
        while True:
            batch = self._get_json(
                "/user/repos",
                params={'sort': 'updated', 'per_page': self.per_page, 'page': page}
            )
            if not batch:
                break
            repos.extend(batch)
            if len(batch) < self.per_page:
                break
            page += 1

        logger.info(f"Fetched {len(repos)} repositories across {page} page(s)")
        return repos

    def _get_languages(self, full_name: str) -> Dict[str, int]:
        response = self._request(f"/repos/{full_name}/languages")
        if response.status_code != 200:
            return {}
        return response.json() or {}

    def _has_readme(self, full_name: str) -> bool:
        return self._request(f"/repos/{full_name}/readme").status_code == 200

    def _contributor_commits(self, full_name: str, login: str) -> int:
        """Commit total from contributor statistics; 0 while GitHub is still computing (202)."""
        response = self._request(f"/repos/{full_name}/stats/contributors")
        if response.status_code != 200:
            return 0
        stats = response.json()
        if not isinstance(stats, list):
            return 0
        for contributor in stats:
            author = contributor.get('author') or {}
            if (author.get('login') or '').lower() == login.lower():
                return int(contributor.get('total') or 0)
        return 0

    def _listed_commits(self, full_name: str, login: str) -> int:
        """Count commits authored by ``login`` page by page (capped)."""
        count = 0
        for page in range(1, self.max_commit_pages + 1):
            response = self._request(
                f"/repos/{full_name}/commits",
                params={'author': login, 'per_page': self.per_page, 'page': page}
            )
            # 409: empty repository
            if response.status_code != 200:
                break
            batch = response.json()
            count += len(batch)
            if len(batch) < self.per_page:
                break
        return count

    def enrich_repository(self, payload: Dict[str, Any], login: str) -> Repository:
        """
        Build a Repository from a listing entry plus per-repo lookups.

        Any failure degrades to no languages, no README and zero commits.
        """
        full_name = payload.get('full_name') or f"{login}/{payload['name']}"
        try:
            languages = self._get_languages(full_name)
            has_readme = self._has_readme(full_name)
            commits = self._contributor_commits(full_name, login)
            if commits <= 0:
                commits = self._listed_commits(full_name, login)
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Could not enrich {full_name}: {e}")
            return Repository.from_api(payload, login)

        repo = Repository.from_api(
            payload, login,
            languages=languages,
            has_readme=has_readme,
            user_commits=commits,
        )
        logger.debug(f"{repo.name}: {commits} commits (owner: {repo.is_owner})")
        return repo

    def get_activity_graph(
        self,
        login: str,
        days: int = 90,
        now: Optional[datetime] = None,
    ) -> List[ActivityDay]:
        """
        Commits pushed per UTC day over the last ``days`` days, oldest first.

        Built from the public events feed; failures return an empty graph.
        """
        try:
            events = self._get_json(f"/users/{login}/events/public", params={'per_page': 100})
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching activity graph for {login}: {e}")
            return []

        today = ensure_utc(now or utc_now()).date()
        activity = {
            (today - timedelta(days=offset)).isoformat(): 0
            for offset in range(days - 1, -1, -1)
        }

        for event in events or []:
            if event.get('type') != 'PushEvent' or not event.get('created_at'):
                continue
            day = ensure_utc(isoparse(event['created_at'])).date().isoformat()
            if day in activity:
                activity[day] += (event.get('payload') or {}).get('size') or 1

        return [ActivityDay(date=day, commits=commits) for day, commits in activity.items()]

    def fetch_profile(self) -> Tuple[Dict[str, Any], List[Repository]]:
        """
        Fetch the user profile and all enriched repositories.

        Raises:
            UpstreamServiceException: The profile or repository listing failed.
        """
        try:
            user = self.get_authenticated_user()
            payloads = self.list_repositories()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching GitHub profile: {e}")
            raise UpstreamServiceException(f"Failed to fetch GitHub profile: {e}") from e

        login = user['login']
        repos = [self.enrich_repository(payload, login) for payload in payloads]
        return user, repos

    def close(self):
        """Close the session and release resources."""
        self.session.close()
        logger.info("GitHubClient session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
