"""Utilities for building SQL generation prompts."""

from typing import List

DEFAULT_SCHEMA = """CREATE TABLE employees (
  id INTEGER PRIMARY KEY,
  name TEXT NOT NULL,
  department TEXT,
  salary INTEGER,
  hire_date DATE
);

CREATE TABLE departments (
  id INTEGER PRIMARY KEY,
  name TEXT NOT NULL,
  budget INTEGER
);"""

EXAMPLE_QUESTIONS: List[str] = [
    "Show me all employees in the Engineering department",
    "What's the average salary by department?",
    "Find the top 5 highest paid employees",
    "List all departments with their total employee count",
]

JSON_ONLY_INSTRUCTION = (
    "Please respond with ONLY a JSON object in this exact format "
    "(no markdown, no backticks, no preamble):"
)


def build_prompt(schema: str, question: str) -> str:
    """Create the AI prompt for SQL generation.

    Both inputs are embedded verbatim. The model is asked for a bare JSON
    object with ``sql`` and ``explanation`` keys.
    """

    return f"""You are a SQL expert. Given the following database schema and a natural language question, generate a SQL query.

Database Schema:
{schema}

Question: {question}

{JSON_ONLY_INSTRUCTION}
{{
  "sql": "the SQL query here",
  "explanation": "brief explanation of what the query does"
}}"""
