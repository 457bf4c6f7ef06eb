"""
Chat interpreter: end-to-end pipeline from chat text to a canonical command
"""

from datetime import datetime
from typing import Optional
from taskchat.models.command import IntentType
from taskchat.models.response import BotResponse
from taskchat.models.task import TaskType
from taskchat.services.command_synthesizer import CommandSynthesizer
from taskchat.services.help_service import HelpService
from taskchat.services.intent_classifier import IntentClassifier
from taskchat.services.task_type_resolver import TaskTypeResolver
from taskchat.services.text_handler import TextHandler
from taskchat.utils.date_parser import parse_date_time
from taskchat.utils.error_handler import DateParseError, handle_error
from taskchat.utils.logger import logger


class ChatInterpreter:
    """
    Chat interpreter

    Pipeline: normalize → classify → resolve task type → synthesize.
    The interpreter never reads the clock; callers pass "now".
    """

    def __init__(
        self,
        classifier: Optional[IntentClassifier] = None,
        resolver: Optional[TaskTypeResolver] = None,
        synthesizer: Optional[CommandSynthesizer] = None,
        text_handler: Optional[TextHandler] = None,
        help_service: Optional[HelpService] = None,
    ):
        """
        Initialize chat interpreter

        Args:
            classifier: Intent classifier
            resolver: Task type resolver
            synthesizer: Command synthesizer
            text_handler: Chat text normalizer
            help_service: Help text catalog
        """
        self.text_handler = text_handler or TextHandler()
        self.resolver = resolver or TaskTypeResolver()
        self.classifier = classifier or IntentClassifier(self.resolver, self.text_handler)
        self.synthesizer = synthesizer or CommandSynthesizer()
        self.help_service = help_service or HelpService()
        self.logger = logger

    def interpret(self, text: Optional[str]) -> str:
        """
        Interpret chat text as one canonical command

        Args:
            text: Raw chat text

        Returns:
            Canonical command string
        """
        command, _, _ = self._interpret(text)
        return command

    def handle(self, text: Optional[str], now: datetime) -> BotResponse:
        """
        Interpret chat text and check the time phrase of events and deadlines

        Args:
            text: Raw chat text
            now: Current instant for relative date expressions

        Returns:
            BotResponse; data holds intent, command and the resolved
            date_time with its defaulted flags where applicable
        """
        try:
            processed = self.text_handler.process(text or "")
            if not self.text_handler.validate(processed):
                return BotResponse(
                    message="Message is too long or empty.",
                    success=False,
                    data={"intent": IntentType.UNKNOWN.value, "command": self.synthesizer.help()},
                )

            command, intent_type, decision = self._interpret(processed)
            data = {"intent": intent_type.value, "command": command}

            if command.split(" ", 1)[0] == "help":
                data["needs_clarification"] = bool(decision and decision.needs_clarification)
                return BotResponse(
                    message=self.help_service.help_for_command(command),
                    data=data,
                )

            if decision is not None and decision.task_type in (TaskType.DEADLINE, TaskType.EVENT):
                try:
                    parsed = parse_date_time(decision.time_phrase, now)
                except DateParseError as e:
                    data["needs_clarification"] = True
                    return handle_error(e).to_bot_response(data)
                data["date_time"] = parsed.value.isoformat()
                data["time_defaulted"] = parsed.time_defaulted
                data["date_defaulted"] = parsed.date_defaulted

            return BotResponse(message=command, data=data)

        except Exception as e:
            self.logger.error(f"Error handling message: {e}", exc_info=True)
            return handle_error(e).to_bot_response()

    def _interpret(self, text: Optional[str]):
        intent = self.classifier.classify(text)

        decision = None
        if intent.type == IntentType.TASK_CREATION:
            decision = self.resolver.resolve(intent.raw_text, intent.task_type)

        command = self.synthesizer.synthesize(intent, decision)
        self.logger.debug(f"[Interpreter] '{text}' -> {command}")
        return command, intent.type, decision
