"""Prompt templates for post summarization and follow-up questions."""

BRIEF_PROMPT = """Analyze the recent tweets below and describe what this person has been up to lately.

Recent tweets from {author}:
{posts}

Look for things like:
- What they are building or working on
- Places they are traveling to
- Life updates or personal news
- Projects they are excited about
- Current interests or hobbies

Respond with a JSON object of exactly this shape and nothing else (no markdown):
{{
  "tags": ["tag1", "tag2", "tag3"],
  "summary": "2-3 sentences about their recent activities, projects or life updates"
}}

The tags must be 3 short topic words describing their interests, work or focus areas
(for example "AI", "Design", "Travel", "Startups", "Photography", "Fitness")."""

DETAILED_PROMPT = """Analyze the recent tweets below and produce a detailed profile of this person's recent activity.

Recent tweets from {author}:
{posts}

Respond with a JSON object of exactly this shape and nothing else (no markdown):
{{
  "summary": "2-3 sentences about their recent activity and interests",
  "topics": ["topic1", "topic2", "topic3"],
  "sentiment": "positive/negative/neutral",
  "engagement": "high/medium/low"
}}"""

FOLLOWUP_PROMPT = """You are helping someone learn about a Twitter user named {display_name} (@{handle}) based on their recent tweets.

RECENT TWEETS:
{posts}

QUESTION: {question}

Answer briefly and conversationally (1-2 sentences at most), grounded in the tweets above.
You may add broader, well-established knowledge about this person when it is relevant, but:
- Lead with what the tweets say whenever they are relevant
- Do not speculate

If the question asks for help writing a message or an invite, address {display_name} directly using "you" and "your".

Keep the tone friendly and casual, like describing this person to a peer who also follows them."""

FOLLOWUP_POST_LINE = (
    '{index}. "{text}" ({likes} likes, {reposts} retweets, posted {posted})'
)
