"""
holdembot Agents - seat decision makers

Bots sample weighted-random actions through BotPolicy; human seats are
driven from outside through the table.
"""

from holdembot.agents.base import BaseAgent, HumanAgent
from holdembot.agents.bot_agent import BotAgent
from holdembot.agents.policy import BotPolicy, Decision

__all__ = ["BaseAgent", "HumanAgent", "BotAgent", "BotPolicy", "Decision"]
