import logging
from app.modules.children.schemas import ChildContext
from app.platform.ports.text_responder import AssistantReply, TextResponderPort

log = logging.getLogger(__name__)

FEVER_REPLY = AssistantReply(
    content=(
        "For fever in children, here are some general guidelines:\n\n"
        "• Monitor temperature regularly\n"
        "• Ensure adequate hydration\n"
        "• Dress in light clothing\n"
        "• Consider age-appropriate fever reducers if recommended by your pediatrician\n"
        "• Seek immediate medical attention if fever is very high or accompanied by concerning symptoms\n\n"
        "Please consult your pediatrician for personalized advice, especially for children under 3 months."
    ),
    evidence="Fever management guidelines based on AAP recommendations",
    sources=["American Academy of Pediatrics", "CDC Guidelines"],
)

VACCINATION_REPLY = AssistantReply(
    content=(
        "Vaccinations are crucial for protecting children from serious diseases. \n\n"
        "Key points:\n"
        "• Follow the recommended vaccination schedule\n"
        "• Vaccines are safe and effective\n"
        "• Mild side effects are normal and indicate immune system response\n"
        "• Keep vaccination records updated\n\n"
        "Please consult your pediatrician about your child's vaccination schedule."
    ),
    evidence="Based on CDC vaccination guidelines and WHO recommendations",
    sources=["CDC", "WHO", "American Academy of Pediatrics"],
)

FALLBACK_REPLY = AssistantReply(
    content=(
        "Thank you for your question. As a pediatric AI assistant, I'm here to provide evidence-based health information.\n\n"
        "For the best care for your child, I recommend:\n"
        "• Consulting with your pediatrician for personalized advice\n"
        "• Keeping up with regular check-ups\n"
        "• Maintaining a healthy lifestyle with proper nutrition and exercise\n\n"
        "Could you please provide more specific details about your concern so I can offer more targeted guidance?"
    ),
    evidence="General pediatric care principles",
    sources=["American Academy of Pediatrics"],
)

class KeywordResponder(TextResponderPort):
    """Canned replies chosen by keyword; first match wins, fever before vaccination."""

    async def respond(self, message: str, child: ChildContext | None = None) -> AssistantReply:
        text = (message or "").lower()
        if "fever" in text:
            reply = FEVER_REPLY
        elif "vaccination" in text or "vaccine" in text:
            reply = VACCINATION_REPLY
        else:
            reply = FALLBACK_REPLY
        log.debug(f"Keyword responder picked '{reply.evidence}' for {len(text)} chars")
        return AssistantReply(content=reply.content, evidence=reply.evidence, sources=list(reply.sources))
