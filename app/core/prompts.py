from typing import Optional

from app.models.schemas import VisualStyle


DEFAULT_CUSTOM_STYLE = "A creative data visualization."

STYLE_DESCRIPTIONS = {
    VisualStyle.WHITEBOARD: (
        "A clean, hand-drawn whiteboard style infographic. White background, "
        "black marker lines, simple doodles, red accent highlights. "
        "Professional yet playful educational drawing."
    ),
    VisualStyle.NOTEBOOK: (
        "A sketch on lined notebook paper. Blue ballpoint pen aesthetic, "
        "scribbles, doodles, handwritten text annotations. "
        "Academic and messy but legible."
    ),
}

# Short blurbs for the style picker
STYLE_LABELS = {
    VisualStyle.WHITEBOARD: "Clean markers on a white board",
    VisualStyle.NOTEBOOK: "Blue pen on lined paper",
    VisualStyle.CUSTOM: "Your creative prompt",
}

SYSTEM_INSTRUCTION = (
    "You are an AI video analyst. Your primary goal is to accurately retrieve "
    "and visualize the specific content of YouTube videos given a URL. You must "
    "strictly verify that the content you find matches the specific video ID provided."
)

analysis_template = """
    I need to create a visual summary for a YouTube video located at: {video_url} {search_hint}

    TASK:
    1. USE the 'googleSearch' tool to find specific information about this video.
       - Search for the specific Video ID "{video_id}".
       - Locate the video Title, Channel, and a textual summary or transcript.
    2. VERIFY: You must find content that specifically matches this Video ID.
       - Do NOT hallucinate content based on keywords in the URL.
       - Do NOT provide generic advice.
       - If you cannot find the specific video details (title + content), return an error.
    3. GENERATE:
       - Summarize the ACTUAL video content into 3 key bullet points.
       - Create a detailed image generation prompt adhering to this style: "{style_description}".

    Output Format (JSON Only):
    {{
      "videoTitle": "The exact title of the video found",
      "summary": "1. [Key Point 1]\\n2. [Key Point 2]\\n3. [Key Point 3]",
      "imagePrompt": "The detailed image generation prompt..."
    }}
    OR
    {{
      "error": "Reason why video content could not be verified..."
    }}

    Return ONLY valid JSON. No markdown formatting.
    """


def style_description(style: VisualStyle, custom_style_prompt: Optional[str] = None) -> str:
    """Describe a visual style in words the image model can follow."""
    style = VisualStyle(style)
    if style == VisualStyle.CUSTOM:
        if custom_style_prompt and custom_style_prompt.strip():
            return custom_style_prompt
        return DEFAULT_CUSTOM_STYLE
    return STYLE_DESCRIPTIONS[style]


def build_analysis_prompt(video_url: str, style_text: str, video_id: str = "") -> str:
    """Fill the analysis template for one video."""
    search_hint = f"(Video ID: {video_id})" if video_id else ""
    return analysis_template.format(
        video_url=video_url,
        search_hint=search_hint,
        video_id=video_id,
        style_description=style_text,
    )
