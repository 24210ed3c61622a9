"""
Pytest configuration and shared fixtures.
"""

from typing import List

import pytest

from craftlab_careers.schemas import CandidateProfile, Opportunity


@pytest.fixture
def attachee_profile() -> CandidateProfile:
    """Attachee in Nairobi preferring hybrid tech roles."""
    return CandidateProfile(
        id="student-1",
        name="Amina Otieno",
        email="amina@example.com",
        user_type="attachee",
        skills={"programming": ["javascript", "react"]},
        location="Nairobi",
        preferences={"workType": "hybrid", "salaryRange": "", "industries": ["Technology"]},
    )


@pytest.fixture
def bare_profile() -> CandidateProfile:
    """Profile with nothing filled in beyond the id."""
    return CandidateProfile(id="student-2")


@pytest.fixture
def techcorp_internship() -> Opportunity:
    return Opportunity(
        id="1",
        title="Software Development Internship",
        company="TechCorp Kenya",
        location="Nairobi, Kenya",
        type="internship",
        salary="KSh 25,000/month",
        requirements={"skills": ["JavaScript", "React", "Node.js", "Git"]},
        work_type="hybrid",
        industry="Technology",
    )


@pytest.fixture
def ngo_volunteer() -> Opportunity:
    return Opportunity(
        id="2",
        title="Digital Marketing Volunteer",
        company="NGO Impact",
        location="Remote",
        type="volunteer",
        requirements={"skills": ["Social Media", "Content Creation", "Analytics"]},
        work_type="remote",
        industry="Non-profit",
    )


@pytest.fixture
def analytics_attachment() -> Opportunity:
    return Opportunity(
        id="3",
        title="Data Analysis Attachment",
        company="Analytics Plus",
        location="Mombasa, Kenya",
        type="attachment",
        requirements={"skills": ["Python", "SQL", "Excel", "Statistics"]},
        work_type="onsite",
        industry="Analytics",
    )


@pytest.fixture
def sample_opportunities(techcorp_internship, ngo_volunteer, analytics_attachment) -> List[Opportunity]:
    """Listing order as returned by the backend."""
    return [ngo_volunteer, analytics_attachment, techcorp_internship]
