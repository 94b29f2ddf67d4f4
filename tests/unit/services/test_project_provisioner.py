from __future__ import annotations

import random

from orderdesk.models import Client, Project
from orderdesk.services.project_provisioner import PROJECT_COLORS, ProjectProvisioner, ProjectStore, project_name


def test_project_name_format():
    assert project_name("Acme", "Widget", 2026) == "Acme_Widget_2026"


def test_ensure_project_creates_once(db_session, acme):
    provisioner = ProjectProvisioner(ProjectStore(db_session), rng=random.Random(7))

    project, created = provisioner.ensure_project(acme.id, "Acme", "Widget", 2026, note="Kickoff in March")
    assert created is True
    assert project.name == "Acme_Widget_2026"
    assert project.client_id == acme.id
    assert project.description == "Kickoff in March"
    assert project.color == random.Random(7).choice(PROJECT_COLORS)

    again, created_again = provisioner.ensure_project(acme.id, "Acme", "Widget", 2026, note="ignored")
    assert created_again is False
    assert again.id == project.id
    assert db_session.query(Project).count() == 1


def test_same_name_for_another_client_is_a_separate_project(db_session, acme):
    db_session.add(Client(id="client-globex", name="Globex"))
    db_session.commit()
    provisioner = ProjectProvisioner(ProjectStore(db_session))

    provisioner.ensure_project(acme.id, "Acme", "Widget", 2026)
    _project, created = provisioner.ensure_project("client-globex", "Acme", "Widget", 2026)

    assert created is True
    assert db_session.query(Project).count() == 2


def test_empty_note_leaves_description_unset(db_session, acme):
    provisioner = ProjectProvisioner(ProjectStore(db_session))
    project, _created = provisioner.ensure_project(acme.id, "Acme", "Gadget", 2025, note="")
    assert project.description is None
    assert project.color in PROJECT_COLORS
