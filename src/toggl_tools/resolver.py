"""Resolve a project name typed by the user against the workspace projects.

A query matches a project when all of its characters appear, in order, in
the project's short name (case-folded). "whl" matches both "wheel" and
"cartwheel"; a prefix is just the tightest kind of match.

Matches are ranked by how compact the matched characters are: the length of
the smallest window of the name that holds the whole query, minus the query
length. Contiguous matches score 0.
"""

from typing import Iterable, Optional

from .exceptions import AmbiguousProjectError, ProjectNotFoundError
from .models import Project


def _window(query: str, candidate: str) -> Optional[tuple[int, int]]:
    """Tightest (start, end) window of candidate holding query as a subsequence."""
    best = None
    for start, ch in enumerate(candidate):
        if ch != query[0]:
            continue

        pos = start + 1
        for q in query[1:]:
            pos = candidate.find(q, pos)
            if pos == -1:
                return best
            pos += 1

        if best is None or pos - start < best[1] - best[0]:
            best = (start, pos)

    return best


def match_score(query: str, candidate: str) -> Optional[int]:
    """Compactness score of query in candidate, None when it does not match."""
    query, candidate = query.casefold(), candidate.casefold()
    if not query:
        return 0

    window = _window(query, candidate)
    if window is None:
        return None
    start, end = window
    return (end - start) - len(query)


def _rank(query: str, project: Project) -> Optional[tuple[int, int, str]]:
    name = project.name.casefold()
    score = match_score(query, name)
    if score is None:
        return None
    window = _window(query.casefold(), name) if query else (0, 0)
    return score, window[0], name


def find_projects(query: str, projects: Iterable[Project]) -> list[Project]:
    """Projects whose name fuzzy-matches query, best match first."""
    ranked = []
    for project in projects:
        rank = _rank(query, project)
        if rank is not None:
            ranked.append((rank, project))

    ranked.sort(key=lambda item: item[0])
    return [project for _, project in ranked]


def resolve_project(query: str, projects: Iterable[Project]) -> Project:
    """The single project query refers to; several matches are an error."""
    matches = find_projects(query, projects)
    if not matches:
        raise ProjectNotFoundError(query)
    if len(matches) == 1:
        return matches[0]

    names = sorted((p.full_name for p in matches), key=str.casefold)
    raise AmbiguousProjectError(query, names)
