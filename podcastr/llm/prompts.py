def _podcast_script_prompt(podcast_name: str, language: str, content: str) -> str:
    """
    Returns the prompt for turning page content into a podcast script.
    Returns:
        Prompt string
    """
    return (
        f"Please create an engaging and captivating podcast from the following text "
        f"with the title {podcast_name}. "
        f"The podcast should be written in {language} and have a maximum reading "
        "duration of 5 minutes. "
        "It should include a brief, compelling introduction to the topic, followed by "
        "a clear and accessible presentation of the main content. "
        "The tone should be entertaining and aimed at a broad audience. "
        "Avoid stage directions or headings and focus directly on the podcast content. "
        f"Here is the content: {content}"
    )


def _podcast_description_prompt(language: str, script: str) -> str:
    """
    Returns the prompt for a podcast directory description.
    Returns:
        Prompt string
    """
    return (
        "Please create a concise and engaging description of the podcast based on "
        "the provided script. "
        "The description should briefly summarize the key topic, appeal to a broad "
        "audience, and be suitable for podcast directories. "
        f"Write the description in {language}. "
        f"Here is the script: {script}"
    )


def _social_media_posts_prompt(language: str, script: str) -> str:
    """
    Returns the prompt for LinkedIn, Twitter and Facebook posts.
    The model must answer with a JSON object.
    Returns:
        Prompt string
    """
    return (
        "Create engaging social media posts based on the provided podcast script. "
        "The posts should be creative, captivating, and concise, and use emojis "
        "to support the tone. "
        f"Write all posts in {language}. "
        "For LinkedIn, write a professional yet personal post with key takeaways, "
        "under 280 words. "
        "For Twitter (X), write a short post within the 280-character limit. "
        "For Facebook, write a conversational post of up to 500 words that invites "
        "the community to interact. "
        "Return ONLY a valid JSON object with the keys "
        '"linkedin", "twitter" and "facebook", each holding the post text. '
        f"Here is the script: {script}"
    )


def _cover_image_preparation_prompt(script: str) -> str:
    """
    Returns the prompt turning a script into a safe image description.
    Returns:
        Prompt string
    """
    return (
        "Please transform the following text into an image description that adheres "
        "to safety guidelines. "
        "The description should be neutral, factual, and precise. "
        "Avoid any controversial or sensitive topics and any depiction of violence. "
        "Do not include the names of characters or real-life individuals. "
        "The description should be written in English and serve as the basis for "
        "an appealing podcast cover. "
        f"Here is the text: {script}"
    )
