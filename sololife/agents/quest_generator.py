"""Quest generation using a LangChain chat model."""

import json
import logging
from typing import Any, Optional

from langchain.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from pydantic import ValidationError

from sololife.api.llm_config import LLMConfigManager
from sololife.config import DEFAULT_QUEST_BATCH_SIZE, DEFAULT_QUEST_MAX_EXP_REWARD
from sololife.errors import InvalidArgumentError, QuestGenerationError
from sololife.helpers.debug import log_call
from sololife.models.player_class import PlayerClass
from sololife.models.quest import Quest, quests_from_records
from sololife.models.stats import Attribute

logger = logging.getLogger(__name__)


class QuestGenerator:
    """Asks a chat model for a batch of real-life quests for the player's class."""

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        config_manager: Optional[LLMConfigManager] = None,
        batch_size: int = DEFAULT_QUEST_BATCH_SIZE,
        max_exp_reward: int = DEFAULT_QUEST_MAX_EXP_REWARD,
    ) -> None:
        """
        Initialize quest generator.

        Args:
            llm: Chat model to use. If None, one is taken from ``config_manager``.
            config_manager: Source of the chat model when ``llm`` is not given
            batch_size: Number of quests to ask for
            max_exp_reward: Highest experience reward accepted from the model
        """
        self._llm = llm
        self._config_manager = config_manager or LLMConfigManager()
        self.batch_size = batch_size
        self.max_exp_reward = max_exp_reward

        self.prompt = ChatPromptTemplate.from_messages(
            [
                (
                    "system",
                    """You are the quest system of a "solo leveling" life app. The player is a real person
who levels up by completing small, practical tasks in their everyday life.

Create short real-life quests that:
1. Can be finished in one day
2. Match the flavor of the player's class
3. Lean on the attributes where the player is weakest

Respond ONLY with a JSON array. Each element must be an object with:
- title: string (short, gamified)
- description: string (one or two sentences, concrete and actionable)
- expReward: integer between 10 and {max_exp_reward}
- statRewards: object mapping attribute names to small positive integers (1 to 3)

Allowed attribute names: {attribute_names}""",
                ),
                (
                    "user",
                    "Class: {player_class}\nCurrent attributes: {attributes}\nGenerate {count} quests.",
                ),
            ]
        )

    def update_llm(self, llm: Optional[BaseChatModel]) -> None:
        """Use a different chat model for the following requests."""
        self._llm = llm

    def _get_llm(self) -> Optional[BaseChatModel]:
        if self._llm is not None:
            return self._llm
        return self._config_manager.get_llm()

    @log_call
    def generate(self, player_class: PlayerClass, attributes: dict[str, int]) -> list[Quest]:
        """
        Generate a batch of quests. Makes exactly one request; no retry.

        Args:
            player_class: Selected character class
            attributes: Current attribute map (name -> value)

        Returns:
            Generated quests in the order the model returned them
        """
        llm = self._get_llm()
        if llm is None:
            raise QuestGenerationError("No language model is configured for quest generation")

        try:
            class_name = PlayerClass.parse(player_class).value
        except InvalidArgumentError as e:
            raise QuestGenerationError(f"Cannot generate quests: {e}") from e

        messages = self.prompt.format_messages(
            player_class=class_name,
            attributes=json.dumps(attributes),
            count=self.batch_size,
            max_exp_reward=self.max_exp_reward,
            attribute_names=", ".join(attribute.value for attribute in Attribute),
        )

        try:
            response = llm.invoke(messages)
        except Exception as e:
            logger.error(f"Quest generation request failed: {e}", exc_info=True)
            raise QuestGenerationError(f"Quest service request failed: {e}") from e

        content = response.content if hasattr(response, "content") else str(response)
        quests = self.parse_quests(content, max_exp_reward=self.max_exp_reward)
        logger.info(f"Generated {len(quests)} quest(s) for {class_name}")
        return quests

    @staticmethod
    def parse_quests(content: Any, max_exp_reward: Optional[int] = None) -> list[Quest]:
        """
        Parse model output into quests.

        Accepts a JSON array of quest records or an object with a ``quests``
        array, optionally wrapped in a Markdown code block.

        Args:
            content: Message content from the chat model
            max_exp_reward: Reject the batch if any quest rewards more experience
        """
        text = _content_to_text(content).strip()
        if text.startswith("```"):
            lines = text.split("\n")
            text = "\n".join(line for line in lines if not line.strip().startswith("```"))

        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = _extract_json_array(text)
            if data is None:
                logger.warning(f"Quest generator returned non-JSON response: {text[:200]}")
                raise QuestGenerationError("Quest service returned a response that is not JSON")

        if isinstance(data, dict) and "quests" in data:
            data = data["quests"]
        if not isinstance(data, list):
            raise QuestGenerationError("Quest service response is not a list of quests")

        try:
            quests = quests_from_records(data)
        except ValidationError as e:
            logger.warning(f"Quest generator returned invalid quests: {e.errors()}")
            raise QuestGenerationError(f"Quest service returned invalid quests: {e.error_count()} error(s)") from e

        if not quests:
            raise QuestGenerationError("Quest service returned no quests")

        if max_exp_reward is not None:
            too_generous = [quest.title for quest in quests if quest.exp_reward > max_exp_reward]
            if too_generous:
                logger.warning(f"Quest generator exceeded exp reward limit {max_exp_reward}: {too_generous}")
                raise QuestGenerationError(
                    f"Quest service returned {len(too_generous)} quest(s) rewarding more than {max_exp_reward} exp"
                )
        return quests


def _content_to_text(content: Any) -> str:
    """Flatten message content, which may be a list of content blocks."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, dict):
                parts.append(str(block.get("text", "")))
            else:
                parts.append(str(block))
        return "".join(parts)
    return str(content)


def _extract_json_array(text: str) -> Optional[list]:
    """Find a JSON array embedded in surrounding prose."""
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end <= start:
        return None
    try:
        data = json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, list) else None
