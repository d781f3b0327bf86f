"""Rows of the site database."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Education:
    id: int
    name: str


@dataclass(frozen=True)
class Language:
    name: str


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    description: str


@dataclass(frozen=True)
class ProjectsSkill:
    p_id: int
    s_id: int


@dataclass(frozen=True)
class Skill:
    id: int
    name: str


@dataclass(frozen=True)
class Userinfo:
    phonenumber: str
    email: str
    user_location: str
    linkedin: str
    github: str


@dataclass(frozen=True)
class ProjectSkillRow:
    """One row of the projects-to-skills join."""

    project: Project
    skill: Skill