# -*- coding: utf-8 -*-
"""
Nested read schemas combining events, slots, topics and registrations.
"""

from typing import List

from .event import EventRead
from .slot import SlotRead, SlotWithEvent
from .topic import TopicRead
from .registration import RegistrationBrief


class SlotWithTopics(SlotRead):
    topics: List[TopicRead] = []


class SlotWithTopicsAndEvent(SlotWithEvent):
    topics: List[TopicRead] = []


class TopicWithRegistrations(TopicRead):
    registrations: List[RegistrationBrief] = []


class SlotDetail(SlotRead):
    topics: List[TopicWithRegistrations] = []


class EventWithSlots(EventRead):
    slots: List[SlotWithTopics] = []


class EventDetail(EventRead):
    slots: List[SlotDetail] = []
