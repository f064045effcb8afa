"""
Prompt construction for startup name generation.
"""

from startup_namer.models import BusinessProfile


def build_name_prompt(profile: BusinessProfile, count: int = 5) -> str:
    """Embed every profile field in a single name-generation prompt."""
    return (
        f"Generate {count} unique and catchy startup names based on the following information:\n"
        f"Keywords: {profile.keywords}\n"
        f"Industry: {profile.industry}\n"
        f"Target Audience: {profile.target_audience}\n"
        f"Company Values: {profile.company_values}\n"
        f"Company Description: {profile.company_description}\n\n"
        f"Format the output strictly as a JSON array of objects, each with a 'name' property. "
        f"Do not include any additional text or formatting."
    )
