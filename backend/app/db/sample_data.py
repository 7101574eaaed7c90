"""Sample posts and users for local development and tests."""
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from backend.app.db import models
from backend.app.repositories.people import PersonRepository
from backend.app.repositories.posts import PostRepository
from backend.app.schemas.people import CreateUserDto
from backend.app.schemas.posts import CreatePostDto

SAMPLE_POSTS = [
    {
        "title": "Mastering Data Structures and Algorithms: A Comprehensive Guide for Programmers",
        "description": "Dive into the world of data structures and algorithms with this comprehensive guide "
        "aimed at programmers looking to enhance their problem-solving skills.",
    },
    {
        "title": "Effective Debugging Techniques: Strategies to Improve Code Quality and Productivity",
        "description": "Enhance your programming skills with a deep dive into effective debugging techniques "
        "to streamline your development process.",
    },
    {
        "title": "Demystifying Machine Learning: A Beginner's Journey into AI Programming",
        "description": "Embark on a beginner-friendly journey into the exciting world of machine learning "
        "and artificial intelligence programming.",
    },
    {
        "title": "Building Scalable Web Applications with Microservices Architecture",
        "description": "Learn how to design and implement scalable web applications using microservices "
        "architecture.",
    },
    {
        "title": "Web Accessibility: Creating Inclusive User Experiences for All",
        "description": "Delve into the crucial topic of web accessibility and learn how to design and develop "
        "websites that are inclusive and usable by all individuals.",
    },
]

SAMPLE_USERS = [
    {
        "firstname": "Alice",
        "lastname": "Smith",
        "username": "alice_smith",
        "password": "password123",
        "email": "alice@example.com",
    },
    {
        "firstname": "John",
        "lastname": "Doe",
        "username": "john_doe123",
        "password": "doe1234",
        "email": "john.doe@example.com",
    },
    {
        "firstname": "Sarah",
        "lastname": "Johnson",
        "username": "sarah_j",
        "password": "sarahpw",
        "email": "sarah.j@example.com",
    },
    {
        "firstname": "Michael",
        "lastname": "Brown",
        "username": "mbrown123",
        "password": "brownie456",
        "email": "michael.b@example.com",
    },
]


def seed_posts(session: Session) -> List[models.Post]:
    repo = PostRepository(session)
    return [repo.create_post(CreatePostDto(**row)) for row in SAMPLE_POSTS]


def seed_people(session: Session, role: models.Role = models.Role.USER) -> List[models.Person]:
    repo = PersonRepository(session)
    return [repo.create_person(role, CreateUserDto(**row))[0] for row in SAMPLE_USERS]
