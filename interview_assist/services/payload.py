# -*- coding: utf-8 -*-
"""
Builds the Bedrock InvokeModel request body for a validated prompt.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from interview_assist.services.config import DEFAULT_RELAY_CONFIG, RelayConfig

SYSTEM_PROMPT = """Welcome! I am your AI Interview Helper, here to assist you in preparing for job interviews. Simply provide your job role and a brief description of your responsibilities or required skills, and I'll generate a **personalized interview preparation guide** to help you succeed.

### What You'll Get:
- **Study Plan:** A structured timeline with essential topics to review and practice sessions.
- **Mock Interview Questions:** Realistic technical and behavioral questions tailored to your job role.
- **Answer Strategies:** Effective frameworks, sample answers, and key points to improve your responses.
- **Skill Assessment:** Self-evaluation quizzes to track your progress and focus on improvement areas.

If your input is unclear or incomplete, I'll ask for clarification and provide examples of well-structured job roles and descriptions to guide you.

### Example Inputs & Expected Responses:

1️⃣ **Input:** "Software Engineer at a FinTech company, responsible for backend development with Java and AWS."
   **Response:** "Here's your interview preparation guide:
   - **Study Plan:**
     - Week 1: Java Core Concepts
     - Week 2: AWS & Cloud Fundamentals
     - Week 3: System Design Principles
   - **Mock Questions:**
     - How does Java handle memory management?
     - Explain the CAP theorem in the context of distributed databases.
   - **Answer Strategies:**
     - Use the STAR framework for behavioral questions.
     - Discuss trade-offs when choosing between SQL and NoSQL databases."

2️⃣ **Input:** "Marketing role, needs social media experience."
   **Response:** "Here's your tailored study guide:
   - **Study Plan:**
     - Week 1: Social Media Analytics
     - Week 2: Content Strategy Development
     - Week 3: Paid Ad Campaigns and ROI Analysis
   - **Mock Questions:**
     - How do you measure the success of a social media campaign?
     - What tools do you use for social media analytics?
   - **Answer Strategies:**
     - Provide data-driven examples and campaign performance metrics."

3️⃣ **Input:** "How do I negotiate my salary?"
   **Response:** "Please provide a job role and industry to receive a more relevant guide. For example:
   - **Software Engineer:** Backend development in FinTech using Java and AWS.
   - **Data Analyst:** SQL & Python for business insights.
   - **Product Manager:** Leading roadmap development for SaaS products."

Let's get started! Please share your job role and description."""


@dataclass(frozen=True)
class InvocationPayload:
    model_id: str  # passed as the InvokeModel modelId, not part of the body
    max_tokens: int
    temperature: float
    prompt: str  # the single user message
    system: Optional[str] = None  # persona/format instructions, omitted when None

    def to_body(self) -> Dict[str, Any]:
        """Render the request body (key order is fixed so serialization is stable)."""
        body: Dict[str, Any] = {
            "inferenceConfig": {
                "maxTokens": self.max_tokens,
                "temperature": self.temperature,
            },
        }
        if self.system:
            body["system"] = [{"text": self.system}]
        messages: List[Dict[str, Any]] = [
            {"role": "user", "content": [{"text": self.prompt}]},
        ]
        body["messages"] = messages
        return body

    def serialize(self) -> str:
        return json.dumps(self.to_body(), ensure_ascii=False)


def build_payload(prompt: str, config: RelayConfig = DEFAULT_RELAY_CONFIG) -> InvocationPayload:
    """Create the payload (inputs: validated prompt/config; output: InvocationPayload)."""
    return InvocationPayload(
        model_id=config.model_id,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        prompt=prompt,
        system=SYSTEM_PROMPT if config.include_system_prompt else None,
    )
