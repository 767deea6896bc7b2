"""
Proxy.

Proxy is a structural design pattern that provides a substitute or
placeholder for another object. A proxy controls access to the original
object, allowing you to perform something either before or after the
request gets through to it. The proxy has the same interface as the
service, which makes it interchangeable with the real object.

Kinds of proxy: virtual (lazy initialization), protection (access control),
remote, logging, caching and smart reference.

Identification: proxies delegate all of the real work to some other object.

Complexity: 2/3
Popularity: 1/3
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pydantic import BaseModel

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="proxy",
    title="Proxy",
    category=PatternCategory.STRUCTURAL,
    intent="Provide a substitute that controls access to another object.",
    applicability=[
        "Lazy initialization of a heavyweight service object (virtual proxy).",
        "Access control (protection proxy).",
        "Local execution of a remote service (remote proxy).",
        "Keeping a history of requests (logging proxy).",
        "Caching request results (caching proxy).",
        "Dismissing a heavyweight object when no clients use it (smart reference).",
    ],
    identification="Each proxy method eventually refers to a service object.",
    complexity=2,
    popularity=1,
    reference_url="https://refactoring.guru/design-patterns/proxy",
))


class Subject(ABC):
    """
    Common operations for both RealSubject and the Proxy. A client written
    against this interface can be given a proxy instead of a real subject.
    """

    @abstractmethod
    def request(self) -> None:
        pass


class RealSubject(Subject):
    """Core business logic that may be slow or sensitive."""

    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    def __init__(self, real_subject: RealSubject):
        self._real_subject = real_subject

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return True

    def log_access(self) -> None:
        print("Proxy: Logging the time of request.", end="")


def client_code(subject: Subject) -> None:
    subject.request()


@demo("proxy", "canonical", "Access check and logging around a real subject")
def run_canonical() -> None:
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client_code(real_subject)

    print("")

    print("Client: Executing the same client code with a proxy:")
    client_code(Proxy(real_subject))
    print("")


class Video(BaseModel):
    id: int
    title: str
    duration: int


_CATALOG = {
    1: Video(id=1, title="Design Patterns in 10 minutes", duration=600),
    2: Video(id=2, title="Proxy explained", duration=420),
}


class ThirdPartyYouTubeLib(ABC):

    @abstractmethod
    def list_videos(self) -> List[Video]:
        pass

    @abstractmethod
    def get_video_info(self, video_id: int) -> Video:
        pass

    @abstractmethod
    def download_video(self, video_id: int) -> Video:
        pass


class ThirdPartyYouTubeClass(ThirdPartyYouTubeLib):
    """
    Service that talks to YouTube. The application slows down if a lot of
    requests are fired at the same time.
    """

    def list_videos(self) -> List[Video]:
        print("Send an API request to YouTube.")
        return list(_CATALOG.values())

    def get_video_info(self, video_id: int) -> Video:
        print(f"Get metadata about video {video_id}.")
        return _CATALOG[video_id]

    def download_video(self, video_id: int) -> Video:
        print(f"Download video {video_id} from YouTube.")
        return _CATALOG[video_id]


class CachedYouTubeClass(ThirdPartyYouTubeLib):
    """
    Caching proxy. Implements the same interface as the service and only
    delegates when a real request has to be sent.
    """

    def __init__(self, service: ThirdPartyYouTubeLib):
        self._service = service
        self._list_cache: Optional[List[Video]] = None
        self._video_cache: Dict[int, Video] = {}
        self._downloads: Dict[int, Video] = {}
        self.need_reset = False

    def _check_reset(self) -> None:
        if self.need_reset:
            self.reset()

    def reset(self) -> None:
        self._list_cache = None
        self._video_cache.clear()
        self._downloads.clear()
        self.need_reset = False

    def list_videos(self) -> List[Video]:
        self._check_reset()
        if self._list_cache is None:
            self._list_cache = self._service.list_videos()
        return self._list_cache

    def get_video_info(self, video_id: int) -> Video:
        self._check_reset()
        if video_id not in self._video_cache:
            self._video_cache[video_id] = self._service.get_video_info(video_id)
        return self._video_cache[video_id]

    def download_video(self, video_id: int) -> Video:
        self._check_reset()
        if video_id not in self._downloads:
            self._downloads[video_id] = self._service.download_video(video_id)
        return self._downloads[video_id]


class YouTubeManager:
    """
    GUI class that used to work directly with the service. It stays
    unchanged as long as it talks to the service through the interface.
    """

    def __init__(self, service: ThirdPartyYouTubeLib):
        self.service = service

    def render_video_page(self, video_id: int) -> Video:
        return self.service.get_video_info(video_id)

    def render_list_panel(self) -> List[Video]:
        return self.service.list_videos()

    def react_on_user_input(self) -> None:
        self.render_video_page(1)
        self.render_list_panel()


@demo("proxy", "caching", "Caching proxy in front of a YouTube client")
def run_caching() -> None:
    print("Without a proxy:")
    manager = YouTubeManager(ThirdPartyYouTubeClass())
    manager.react_on_user_input()
    manager.react_on_user_input()

    print("")

    print("With a caching proxy:")
    manager = YouTubeManager(CachedYouTubeClass(ThirdPartyYouTubeClass()))
    manager.react_on_user_input()
    manager.react_on_user_input()
