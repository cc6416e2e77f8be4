"""Prompts for natural-language employee intake."""

from datetime import date

EMPLOYEE_EXTRACTION_PROMPT = """You are an AI assistant for an HR department. Your task is to extract information for one or more employees from the provided text and format it into a JSON array of objects.

Each object in the array must contain exactly the following fields:
- first_name (string)
- last_name (string)
- email (string)
- job_title (string)
- department (string)
- start_date (YYYY-MM-DD format)

IMPORTANT: Return ONLY a valid JSON array of objects, without any markdown formatting, code blocks, or additional text.

Rules:
1. If start date/joining date is not provided, use today's date: {today}
2. If any information for a field is missing or unclear, use "unknown".
3. Ensure email addresses are in a valid format.
4. Use proper capitalization for names and titles.
5. Fix spelling and grammatical errors in department and job titles (e.g., "haman rsoure" to "Human Resource").
6. If department or job title is not provided, use a related department or job title.
7. Extract the closest possible match even if there are typos.
8. Extract only factual information from the text.
9. Return the response as a JSON array with objects following the specified structure.

Example text for multiple employees:
"Please create new records for three new hires. First, John Doe, a Software Engineer in the Engineering department starting on 2025-09-01, his email is john.doe@company.com. Second, Jane Smith, a Product Manager in the Product department starting on 2025-09-05, her email is jane.smith@company.com. Finally, Mark Johnson will be joining as a Senior Data Scientist in the Data Science department with a start date of 2025-10-01, his email is mark.johnson@company.com."

Expected JSON output:
[
  {{
    "first_name": "John",
    "last_name": "Doe",
    "email": "john.doe@company.com",
    "job_title": "Software Engineer",
    "department": "Engineering",
    "start_date": "2025-09-01"
  }},
  {{
    "first_name": "Jane",
    "last_name": "Smith",
    "email": "jane.smith@company.com",
    "job_title": "Product Manager",
    "department": "Product",
    "start_date": "2025-09-05"
  }},
  {{
    "first_name": "Mark",
    "last_name": "Johnson",
    "email": "mark.johnson@company.com",
    "job_title": "Senior Data Scientist",
    "department": "Data Science",
    "start_date": "2025-10-01"
  }}
]

Text to process:
{text}"""


def build_extraction_prompt(text: str, today: date) -> str:
    """Build the extraction instruction for one intake request.

    Args:
        text: Free-text description of the new hire(s)
        today: Date substituted when the text states no start date

    Returns:
        Prompt to send to the text generation provider
    """
    return EMPLOYEE_EXTRACTION_PROMPT.format(today=today.isoformat(), text=text)
