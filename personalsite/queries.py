"""Read queries against the site database."""

from __future__ import annotations

from contextlib import closing
from typing import Any

from .models import Project, ProjectSkillRow, Skill, Userinfo

_GET_INFO = """
SELECT phonenumber, email, user_location, linkedin, github
FROM userinfo
LIMIT 1
"""

_GET_PROJECTS_W_SKILLS = """
SELECT
  projects.id, projects.name, projects.description,
  skills.id, skills.name
FROM projects
INNER JOIN projects_skills ON projects.id = projects_skills.p_id
INNER JOIN skills ON skills.id = projects_skills.s_id
ORDER BY projects.id
"""

_LIST_LANGUAGES = """
SELECT name
FROM languages
"""

_LIST_PROJECTS = """
SELECT id, name, description
FROM projects
"""

_LIST_SKILLS = """
SELECT id, name
FROM skills
"""

_LIST_SKILLS_BY_PROJECT_ID = """
SELECT skills.id, skills.name
FROM skills
INNER JOIN projects_skills ON skills.id = projects_skills.s_id
INNER JOIN projects ON projects_skills.p_id = projects.id
WHERE projects.id = ?
"""


class Queries:
    """Typed queries over a DB-API connection or transaction."""

    def __init__(self, conn: Any) -> None:
        self._conn = conn

    def with_tx(self, tx: Any) -> "Queries":
        """Return queries that run on ``tx`` instead."""
        return Queries(tx)

    def _fetch(self, sql: str, params: tuple = ()) -> list[tuple]:
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(sql, params)
            return cursor.fetchall()

    def get_info(self) -> Userinfo:
        """Return the owner's contact details; LookupError if there are none."""
        rows = self._fetch(_GET_INFO)
        if not rows:
            raise LookupError("no rows in result set")
        return Userinfo(*rows[0])

    def get_projects_w_skills(self) -> list[ProjectSkillRow]:
        """Return every project-skill pair, ordered by project id."""
        return [
            ProjectSkillRow(Project(pid, pname, pdesc), Skill(sid, sname))
            for pid, pname, pdesc, sid, sname in self._fetch(_GET_PROJECTS_W_SKILLS)
        ]

    def list_languages(self) -> list[str]:
        return [name for (name,) in self._fetch(_LIST_LANGUAGES)]

    def list_projects(self) -> list[Project]:
        return [Project(*row) for row in self._fetch(_LIST_PROJECTS)]

    def list_skills(self) -> list[Skill]:
        return [Skill(*row) for row in self._fetch(_LIST_SKILLS)]

    def list_skills_by_project_id(self, project_id: int) -> list[Skill]:
        return [Skill(*row) for row in self._fetch(_LIST_SKILLS_BY_PROJECT_ID, (project_id,))]