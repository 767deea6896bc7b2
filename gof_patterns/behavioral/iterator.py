"""
Iterator.

Iterator is a behavioral design pattern that lets you traverse elements of a
collection without exposing its underlying representation (list, stack,
tree, etc.). Clients can go over elements of different collections in a
similar fashion using a single iterator interface.

Use the Iterator when your collection has a complex data structure under the
hood but you want to hide its complexity from clients, to reduce
duplication of traversal code, or when your code must traverse structures
whose types are unknown beforehand.

Identification: navigation methods such as next or previous. Client code
that uses iterators might not have direct access to the collection.

Complexity: 2/3
Popularity: 3/3
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Sequence

from pydantic import BaseModel

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.domain.exceptions import ValidationError
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="iterator",
    title="Iterator",
    category=PatternCategory.BEHAVIORAL,
    intent="Traverse a collection without exposing its representation.",
    applicability=[
        "Hide a complex collection structure from clients.",
        "Reduce duplication of traversal code across the app.",
        "Traverse structures whose types are unknown beforehand.",
    ],
    identification="Navigation methods such as next or previous.",
    complexity=2,
    popularity=3,
    reference_url="https://refactoring.guru/design-patterns/iterator",
))


class AlphabeticalOrderIterator:
    """
    Concrete iterator over a WordsCollection. Stores the traversal position
    and direction, so several iterators can walk the same collection
    independently.
    """

    def __init__(self, collection: "WordsCollection", reverse: bool = False):
        self._collection = collection
        self._reverse = reverse
        self._position = 0
        self.rewind()

    def __iter__(self) -> "AlphabeticalOrderIterator":
        return self

    def __next__(self) -> str:
        if not self.valid():
            raise StopIteration()
        item = self.current()
        self._position += -1 if self._reverse else 1
        return item

    def current(self) -> str:
        return self._collection[self._position]

    def key(self) -> int:
        return self._position

    def valid(self) -> bool:
        if self._reverse:
            return self._position >= 0
        return self._position < len(self._collection)

    def rewind(self) -> None:
        self._position = len(self._collection) - 1 if self._reverse else 0


class WordsCollection:
    """Concrete collection handing out fresh iterators."""

    def __init__(self, items: Sequence[str] = ()):
        self._items: List[str] = list(items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self)

    def get_reverse_iterator(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self, True)

    def add_item(self, item: str) -> None:
        self._items.append(item)


@demo("iterator", "canonical", "Straight and reverse traversal of a word collection")
def run_canonical() -> None:
    collection = WordsCollection()
    collection.add_item("First")
    collection.add_item("Second")
    collection.add_item("Third")

    print("Straight traversal:")
    print("\n".join(collection))
    print("")

    print("Reverse traversal:")
    print("\n".join(collection.get_reverse_iterator()), end="")


class Profile(BaseModel):
    id: str
    firstname: str
    lastname: str
    email: str


class ProfileIterator(ABC):
    """Common interface for all profile iterators."""

    @abstractmethod
    def has_more(self) -> bool:
        pass

    @abstractmethod
    def get_next(self) -> Optional[Profile]:
        pass

    def __iter__(self) -> Iterator[Profile]:
        while self.has_more():
            profile = self.get_next()
            if profile is not None:
                yield profile


class SocialNetwork(ABC):
    """
    Collection interface. Declares factory methods producing iterators, one
    per kind of traversal.

    Args:
        profiles: Known profiles by id.
        contacts: Per profile id, the contact ids by relation type
            ("friends" or "coworkers").
    """

    name = "network"

    def __init__(
        self,
        profiles: Sequence[Profile] = (),
        contacts: Optional[Dict[str, Dict[str, List[str]]]] = None,
    ):
        self._profiles: Dict[str, Profile] = {profile.id: profile for profile in profiles}
        self._contacts = contacts or {}

    def social_graph_request(self, profile_id: str, relation: str) -> List[Profile]:
        """Fetch every contact of the given relation in one expensive request."""
        print(f"{self.name}: Loading {relation} of profile {profile_id} over the network...")
        contact_ids = self._contacts.get(profile_id, {}).get(relation, [])
        return [self._profiles[contact_id] for contact_id in contact_ids if contact_id in self._profiles]

    @abstractmethod
    def create_friends_iterator(self, profile_id: str) -> ProfileIterator:
        pass

    @abstractmethod
    def create_coworkers_iterator(self, profile_id: str) -> ProfileIterator:
        pass


class SocialGraphIterator(ProfileIterator):
    """
    Walks the contacts of one profile. The social graph is only requested on
    first use and cached afterwards.
    """

    def __init__(self, network: SocialNetwork, profile_id: str, relation: str):
        self._network = network
        self._profile_id = profile_id
        self._relation = relation
        self._current_position = 0
        self._cache: Optional[List[Profile]] = None

    def _lazy_init(self) -> List[Profile]:
        if self._cache is None:
            self._cache = self._network.social_graph_request(self._profile_id, self._relation)
        return self._cache

    def has_more(self) -> bool:
        return self._current_position < len(self._lazy_init())

    def get_next(self) -> Optional[Profile]:
        if not self.has_more():
            return None
        profile = self._lazy_init()[self._current_position]
        self._current_position += 1
        return profile


class Facebook(SocialNetwork):
    name = "Facebook"

    def create_friends_iterator(self, profile_id: str) -> ProfileIterator:
        return SocialGraphIterator(self, profile_id, "friends")

    def create_coworkers_iterator(self, profile_id: str) -> ProfileIterator:
        return SocialGraphIterator(self, profile_id, "coworkers")


class LinkedIn(SocialNetwork):
    name = "LinkedIn"

    def create_friends_iterator(self, profile_id: str) -> ProfileIterator:
        return SocialGraphIterator(self, profile_id, "friends")

    def create_coworkers_iterator(self, profile_id: str) -> ProfileIterator:
        return SocialGraphIterator(self, profile_id, "coworkers")


class SocialSpammer:
    """Client that only ever sees an iterator, never the whole collection."""

    def send(self, iterator: ProfileIterator, message: str) -> int:
        sent = 0
        while iterator.has_more():
            profile = iterator.get_next()
            if profile is None:
                break
            print(f"Sending message to {profile.email}: {message}")
            sent += 1
        return sent


_SAMPLE_PROFILES = [
    Profile(id="1", firstname="Ada", lastname="Lovelace", email="ada@example.com"),
    Profile(id="2", firstname="Alan", lastname="Turing", email="alan@example.com"),
    Profile(id="3", firstname="Grace", lastname="Hopper", email="grace@example.com"),
    Profile(id="4", firstname="Edsger", lastname="Dijkstra", email="edsger@example.com"),
]

_SAMPLE_CONTACTS = {
    "1": {"friends": ["2", "3"], "coworkers": ["4"]},
    "2": {"friends": ["1"], "coworkers": ["3", "4"]},
}

NETWORKS = {
    "facebook": Facebook,
    "linkedin": LinkedIn,
}


class Application:
    """Configures a collection and an iterator, then hands them to the client."""

    def __init__(self) -> None:
        self.network: Optional[SocialNetwork] = None
        self.spammer: Optional[SocialSpammer] = None

    def config(
        self,
        network_name: str,
        profiles: Sequence[Profile] = tuple(_SAMPLE_PROFILES),
        contacts: Optional[Dict[str, Dict[str, List[str]]]] = None,
    ) -> SocialNetwork:
        network_class = NETWORKS.get(network_name.lower())
        if network_class is None:
            raise ValidationError(
                f"Unknown social network: {network_name}",
                {"supported": sorted(NETWORKS)},
            )
        self.network = network_class(profiles, contacts if contacts is not None else _SAMPLE_CONTACTS)
        self.spammer = SocialSpammer()
        return self.network

    def _require_configured(self) -> None:
        if self.network is None or self.spammer is None:
            raise ValidationError("Application is not configured with a social network")

    def send_spam_to_friends(self, profile: Profile) -> int:
        self._require_configured()
        iterator = self.network.create_friends_iterator(profile.id)
        return self.spammer.send(iterator, "Very important message")

    def send_spam_to_coworkers(self, profile: Profile) -> int:
        self._require_configured()
        iterator = self.network.create_coworkers_iterator(profile.id)
        return self.spammer.send(iterator, "Very important message")


@demo("iterator", "social-network", "Lazy profile iterators over social networks")
def run_social_network() -> None:
    app = Application()
    me = _SAMPLE_PROFILES[0]

    app.config("facebook")
    app.send_spam_to_friends(me)
    print("")

    app.config("linkedin")
    app.send_spam_to_coworkers(me)
