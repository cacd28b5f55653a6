"""
Host registration descriptor for the person works widget.

All four modules reference the same `SHARED_PARAMS` tuple; hosts look up the
callable for a module through `FUNCTIONS` by its `function_name`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from person_works.works.credits import CreditsSource
from person_works.works.modules import (
    get_actor_works,
    get_all_works,
    get_director_works,
    get_other_works,
)

CACHE_DURATION_SECONDS = 172800


@dataclass(frozen=True)
class EnumOption:
    title: str
    value: str


@dataclass(frozen=True)
class ParamSpec:
    name: str
    title: str
    type: str  # input | language | enumeration
    description: str | None = None
    value: str | None = None
    enum_options: tuple[EnumOption, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "title": self.title, "type": self.type}
        if self.description is not None:
            out["description"] = self.description
        if self.enum_options:
            out["enumOptions"] = [{"title": o.title, "value": o.value} for o in self.enum_options]
        if self.value is not None:
            out["value"] = self.value
        return out


@dataclass(frozen=True)
class ModuleSpec:
    id: str
    title: str
    function_name: str
    params: tuple[ParamSpec, ...]
    cache_duration: int = CACHE_DURATION_SECONDS

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "functionName": self.function_name,
            "cacheDuration": self.cache_duration,
            "params": [p.to_dict() for p in self.params],
        }


@dataclass(frozen=True)
class WidgetMetadata:
    id: str
    title: str
    version: str
    required_version: str
    description: str
    author: str
    site: str
    modules: tuple[ModuleSpec, ...] = field(default_factory=tuple)
    cache_duration: int = CACHE_DURATION_SECONDS

    def module(self, module_id: str) -> ModuleSpec:
        for m in self.modules:
            if m.id == module_id:
                return m
        raise KeyError(module_id)


SHARED_PARAMS: tuple[ParamSpec, ...] = (
    ParamSpec(
        name="personId",
        title="个人ID",
        type="input",
        description="在 TMDB 网站获取的数字 ID",
    ),
    ParamSpec(name="language", title="语言", type="language", value="zh-CN"),
    ParamSpec(
        name="type",
        title="类型",
        type="enumeration",
        enum_options=(
            EnumOption("全部", "all"),
            EnumOption("电影", "movie"),
            EnumOption("电视剧", "tv"),
        ),
        value="all",
    ),
    ParamSpec(
        name="sort_by",
        title="排序方式",
        type="enumeration",
        enum_options=(
            EnumOption("发行日期降序", "release_date.desc"),
            EnumOption("评分降序", "vote_average.desc"),
            EnumOption("热门降序", "popularity.desc"),
        ),
        value="popularity.desc",
    ),
)

WIDGET_METADATA = WidgetMetadata(
    id="gerenzuopin",
    title="个人作品",
    version="1.0.4",
    required_version="0.0.1",
    description="获取 TMDB 个人相关作品数据",
    author="Evan",
    site="https://github.com/coisini114",
    modules=(
        ModuleSpec(id="allWorks", title="全部作品", function_name="getAllWorks", params=SHARED_PARAMS),
        ModuleSpec(id="actorWorks", title="演员作品", function_name="getActorWorks", params=SHARED_PARAMS),
        ModuleSpec(id="directorWorks", title="导演作品", function_name="getDirectorWorks", params=SHARED_PARAMS),
        ModuleSpec(id="otherWorks", title="其他作品", function_name="getOtherWorks", params=SHARED_PARAMS),
    ),
)

FUNCTIONS: dict[str, Callable[..., list[dict[str, Any]]]] = {
    "getAllWorks": get_all_works,
    "getActorWorks": get_actor_works,
    "getDirectorWorks": get_director_works,
    "getOtherWorks": get_other_works,
}


def widget_metadata_dict() -> dict[str, Any]:
    """Serialize `WIDGET_METADATA` into the JSON shape widget hosts read."""
    m = WIDGET_METADATA
    return {
        "id": m.id,
        "title": m.title,
        "version": m.version,
        "requiredVersion": m.required_version,
        "description": m.description,
        "author": m.author,
        "site": m.site,
        "cacheDuration": m.cache_duration,
        "modules": [mod.to_dict() for mod in m.modules],
    }


def invoke(
    function_name: str,
    params: Mapping[str, Any] | None,
    *,
    source: CreditsSource | None = None,
) -> list[dict[str, Any]]:
    try:
        fn = FUNCTIONS[function_name]
    except KeyError:
        raise KeyError(f"Unknown widget function: {function_name!r}") from None
    return fn(params, source=source)
