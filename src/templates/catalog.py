"""
템플릿 카탈로그: (kind, variant, 이름) → 파일 본문.

규칙:
- 렌더는 순수 함수: 같은 입력 → 바이트 단위로 같은 출력
- custom 변형: 호출자 본문 그대로 반환 (치환/검증 없음)
- 모르는 변형 → kind 기본 skeleton (항상 쓸 수 있는 결과)
- uxml/uss/cs 식별자는 같은 stem에서 파생 (UINames)
- 버튼 등 affordance는 VARIANT_AFFORDANCES 한 곳에서 정의
  → uxml의 name, uss의 selector, cs의 Q<Button>() 대상이 항상 일치
- cs의 UxmlPath는 markup_path 입력 (위치 결정은 호출자 몫)
"""

from dataclasses import dataclass

from jinja2 import DictLoader, Environment, StrictUndefined

from src.core.naming import UINames, sanitize_name
from src.domain.constants import ASSETS_DIR, UI_DIR
from src.domain.errors import InvalidParameterError
from src.domain.schemas import AssetKind, TemplateVariant

# =============================================================================
# Affordances (uxml/uss/cs 공통)
# =============================================================================


@dataclass(frozen=True)
class Affordance:
    """사용자 조작 요소 (버튼)."""

    name: str  # uxml name = uss class
    label: str  # 버튼 텍스트 (빈 값이면 제목 사용)
    action: str  # PascalCase, 핸들러 이름 OnXxx
    then: str | None = None  # 클릭 후 호출할 C# 구문
    primary: bool = False  # 강조 스타일
    slot: str = "actions"  # uxml 배치 영역 (header, footer, actions)

    @property
    def field(self) -> str:
        """C# 필드 이름 (okButton 등)."""
        return self.action[:1].lower() + self.action[1:] + "Button"

    @property
    def handler(self) -> str:
        return "On" + self.action


VARIANT_AFFORDANCES: dict[TemplateVariant, tuple[Affordance, ...]] = {
    TemplateVariant.WINDOW: (
        Affordance("close-button", "X", "Close", then="Hide()", slot="header"),
        Affordance("cancel-button", "Cancel", "Cancel", then="Hide()", slot="footer"),
        Affordance("ok-button", "OK", "Ok", then="Confirm()", primary=True, slot="footer"),
    ),
    TemplateVariant.PANEL: (
        Affordance("collapse-button", "-", "Collapse", then="ToggleCollapsed()", slot="header"),
    ),
    TemplateVariant.FORM: (
        Affordance("reset-button", "Reset", "Reset", then="ResetFields()"),
        Affordance("submit-button", "Submit", "Submit", then="Submit()", primary=True),
    ),
    TemplateVariant.MODAL: (
        Affordance("cancel-button", "Cancel", "Cancel", then="Close(false)"),
        Affordance("confirm-button", "Confirm", "Confirm", then="Close(true)", primary=True),
    ),
    TemplateVariant.BUTTON: (
        Affordance("button", "", "Click", then="Clicked?.Invoke()", primary=True),
    ),
}

# 제목 Label("title")이 없는 변형
UNTITLED_VARIANTS = frozenset({TemplateVariant.BUTTON})


# =============================================================================
# Skeletons
# =============================================================================

_MARKUP_BASE = """\
<ui:UXML xmlns:ui="UnityEngine.UIElements" xmlns:uie="UnityEditor.UIElements" editor-extension-mode="False">
{% if style_src %}
    <Style src="{{ style_src }}" />
{% endif %}
{% block body %}{% endblock %}
</ui:UXML>
"""

_MARKUP_DOCUMENT = """\
{% extends "markup/_base.uxml" %}
{% block body %}
    <ui:VisualElement name="{{ names.root_name }}" class="{{ names.css_name }}">
        <ui:Label name="title" text="{{ names.title }}" class="{{ names.css_name }}__title" />
        <ui:VisualElement name="content" class="{{ names.css_name }}__content" />
    </ui:VisualElement>
{% endblock %}
"""

_MARKUP_WINDOW = """\
{% extends "markup/_base.uxml" %}
{% block body %}
    <ui:VisualElement name="{{ names.root_name }}" class="{{ names.css_name }} window">
        <ui:VisualElement name="header" class="{{ names.css_name }}__header">
            <ui:Label name="title" text="{{ names.title }}" class="{{ names.css_name }}__title" />
{% for a in affordances if a.slot == "header" %}
            <ui:Button name="{{ a.name }}" text="{{ a.label }}" class="{{ a.name }}" />
{% endfor %}
        </ui:VisualElement>
        <ui:VisualElement name="content" class="{{ names.css_name }}__content" />
        <ui:VisualElement name="footer" class="{{ names.css_name }}__footer">
{% for a in affordances if a.slot == "footer" %}
            <ui:Button name="{{ a.name }}" text="{{ a.label }}" class="{{ a.name }}" />
{% endfor %}
        </ui:VisualElement>
    </ui:VisualElement>
{% endblock %}
"""

_MARKUP_PANEL = """\
{% extends "markup/_base.uxml" %}
{% block body %}
    <ui:VisualElement name="{{ names.root_name }}" class="{{ names.css_name }} panel">
        <ui:VisualElement name="header" class="{{ names.css_name }}__header">
            <ui:Label name="title" text="{{ names.title }}" class="{{ names.css_name }}__title" />
{% for a in affordances if a.slot == "header" %}
            <ui:Button name="{{ a.name }}" text="{{ a.label }}" class="{{ a.name }}" />
{% endfor %}
        </ui:VisualElement>
        <ui:ScrollView name="content" class="{{ names.css_name }}__content" />
    </ui:VisualElement>
{% endblock %}
"""

_MARKUP_FORM = """\
{% extends "markup/_base.uxml" %}
{% block body %}
    <ui:VisualElement name="{{ names.root_name }}" class="{{ names.css_name }} form">
        <ui:Label name="title" text="{{ names.title }}" class="{{ names.css_name }}__title" />
        <ui:TextField name="name-field" label="Name" class="{{ names.css_name }}__field" />
        <ui:TextField name="email-field" label="Email" class="{{ names.css_name }}__field" />
        <ui:Toggle name="agree-toggle" label="I agree" class="{{ names.css_name }}__toggle" />
        <ui:VisualElement name="actions" class="{{ names.css_name }}__actions">
{% for a in affordances if a.slot == "actions" %}
            <ui:Button name="{{ a.name }}" text="{{ a.label }}" class="{{ a.name }}" />
{% endfor %}
        </ui:VisualElement>
    </ui:VisualElement>
{% endblock %}
"""

_MARKUP_MODAL = """\
{% extends "markup/_base.uxml" %}
{% block body %}
    <ui:VisualElement name="{{ names.root_name }}" class="{{ names.css_name }} modal-overlay">
        <ui:VisualElement name="dialog" class="{{ names.css_name }}__dialog">
            <ui:Label name="title" text="{{ names.title }}" class="{{ names.css_name }}__title" />
            <ui:Label name="message" text="Are you sure?" class="{{ names.css_name }}__message" />
            <ui:VisualElement name="actions" class="{{ names.css_name }}__actions">
{% for a in affordances if a.slot == "actions" %}
                <ui:Button name="{{ a.name }}" text="{{ a.label }}" class="{{ a.name }}" />
{% endfor %}
            </ui:VisualElement>
        </ui:VisualElement>
    </ui:VisualElement>
{% endblock %}
"""

_MARKUP_BUTTON = """\
{% extends "markup/_base.uxml" %}
{% block body %}
    <ui:VisualElement name="{{ names.root_name }}" class="{{ names.css_name }}">
{% for a in affordances %}
        <ui:Button name="{{ a.name }}" text="{{ a.label or names.title }}" class="{{ names.css_name }}__button {{ a.name }}">
            <ui:VisualElement name="icon" class="{{ names.css_name }}__icon" />
        </ui:Button>
{% endfor %}
    </ui:VisualElement>
{% endblock %}
"""

_STYLE_BASE = """\
/* {{ names.title }} ({{ variant }}) */
:root {
    {{ names.var_prefix }}-background-color: rgb(42, 42, 42);
    {{ names.var_prefix }}-surface-color: rgb(56, 56, 56);
    {{ names.var_prefix }}-border-color: rgb(25, 25, 25);
    {{ names.var_prefix }}-accent-color: rgb(58, 121, 187);
    {{ names.var_prefix }}-text-color: rgb(230, 230, 230);
    {{ names.var_prefix }}-spacing: 8px;
    {{ names.var_prefix }}-radius: 4px;
{% block variables %}{% endblock %}
}

.{{ names.css_name }} {
{% block root_rule %}
    flex-grow: 1;
    padding: var({{ names.var_prefix }}-spacing);
    background-color: var({{ names.var_prefix }}-background-color);
    color: var({{ names.var_prefix }}-text-color);
{% endblock %}
}
{% if has_title %}

.{{ names.css_name }}__title {
    font-size: 18px;
    -unity-font-style: bold;
    margin-bottom: var({{ names.var_prefix }}-spacing);
}
{% endif %}
{% block rules %}{% endblock %}
{% for a in affordances %}

.{{ names.css_name }} .{{ a.name }} {
    min-width: 32px;
    margin-left: var({{ names.var_prefix }}-spacing);
    border-radius: var({{ names.var_prefix }}-radius);
{% if a.primary %}
    background-color: var({{ names.var_prefix }}-accent-color);
    color: rgb(255, 255, 255);
{% endif %}
}

.{{ names.css_name }} .{{ a.name }}:hover {
    opacity: 0.85;
}
{% endfor %}
"""

_STYLE_COMPONENT = """\
{% extends "stylesheet/_base.uss" %}
{% block rules %}

.{{ names.css_name }}__content {
    flex-grow: 1;
}
{% endblock %}
"""

_STYLE_DOCUMENT = """\
{% extends "stylesheet/_base.uss" %}
{% block root_rule %}
    flex-grow: 1;
    padding: var({{ names.var_prefix }}-spacing);
    color: var({{ names.var_prefix }}-text-color);
{% endblock %}
{% block rules %}

.{{ names.css_name }}__content {
    flex-grow: 1;
    flex-direction: column;
}
{% endblock %}
"""

_STYLE_WINDOW = """\
{% extends "stylesheet/_base.uss" %}
{% block root_rule %}
    position: absolute;
    min-width: 320px;
    min-height: 200px;
    background-color: var({{ names.var_prefix }}-surface-color);
    border-width: 1px;
    border-color: var({{ names.var_prefix }}-border-color);
    border-radius: var({{ names.var_prefix }}-radius);
    color: var({{ names.var_prefix }}-text-color);
{% endblock %}
{% block rules %}

.{{ names.css_name }}__header {
    flex-direction: row;
    align-items: center;
    justify-content: space-between;
    padding: var({{ names.var_prefix }}-spacing);
    background-color: var({{ names.var_prefix }}-background-color);
}

.{{ names.css_name }}__content {
    flex-grow: 1;
    padding: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}__footer {
    flex-direction: row;
    justify-content: flex-end;
    padding: var({{ names.var_prefix }}-spacing);
}
{% endblock %}
"""

_STYLE_PANEL = """\
{% extends "stylesheet/_base.uss" %}
{% block root_rule %}
    background-color: var({{ names.var_prefix }}-surface-color);
    border-radius: var({{ names.var_prefix }}-radius);
    color: var({{ names.var_prefix }}-text-color);
{% endblock %}
{% block rules %}

.{{ names.css_name }}__header {
    flex-direction: row;
    align-items: center;
    justify-content: space-between;
    padding: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}__content {
    flex-grow: 1;
    padding: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}--collapsed .{{ names.css_name }}__content {
    display: none;
}
{% endblock %}
"""

_STYLE_FORM = """\
{% extends "stylesheet/_base.uss" %}
{% block rules %}

.{{ names.css_name }}__field {
    margin-bottom: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}__toggle {
    margin-bottom: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}__actions {
    flex-direction: row;
    justify-content: flex-end;
}
{% endblock %}
"""

_STYLE_MODAL = """\
{% extends "stylesheet/_base.uss" %}
{% block variables %}
    {{ names.var_prefix }}-overlay-color: rgba(0, 0, 0, 0.6);
{% endblock %}
{% block root_rule %}
    position: absolute;
    left: 0;
    top: 0;
    right: 0;
    bottom: 0;
    align-items: center;
    justify-content: center;
    background-color: var({{ names.var_prefix }}-overlay-color);
{% endblock %}
{% block rules %}

.{{ names.css_name }}__dialog {
    min-width: 300px;
    padding: var({{ names.var_prefix }}-spacing);
    background-color: var({{ names.var_prefix }}-surface-color);
    border-radius: var({{ names.var_prefix }}-radius);
    color: var({{ names.var_prefix }}-text-color);
}

.{{ names.css_name }}__message {
    white-space: normal;
    margin-bottom: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}__actions {
    flex-direction: row;
    justify-content: flex-end;
}
{% endblock %}
"""

_STYLE_BUTTON = """\
{% extends "stylesheet/_base.uss" %}
{% block root_rule %}
    flex-direction: row;
    align-items: center;
{% endblock %}
{% block rules %}

.{{ names.css_name }}__button {
    flex-direction: row;
    align-items: center;
    padding: 4px var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}__button:active {
    opacity: 0.7;
}

.{{ names.css_name }}__icon {
    width: 16px;
    height: 16px;
    margin-right: 4px;
}
{% endblock %}
"""

_STYLE_THEME = """\
{% extends "stylesheet/_base.uss" %}
{% block variables %}
    {{ names.var_prefix }}-font-size-small: 11px;
    {{ names.var_prefix }}-font-size: 13px;
    {{ names.var_prefix }}-font-size-large: 18px;
    {{ names.var_prefix }}-success-color: rgb(76, 175, 80);
    {{ names.var_prefix }}-warning-color: rgb(255, 193, 7);
    {{ names.var_prefix }}-error-color: rgb(244, 67, 54);
{% endblock %}
{% block root_rule %}
    font-size: var({{ names.var_prefix }}-font-size);
    background-color: var({{ names.var_prefix }}-background-color);
    color: var({{ names.var_prefix }}-text-color);
{% endblock %}
{% block rules %}

.{{ names.css_name }} .unity-label {
    color: var({{ names.var_prefix }}-text-color);
}

.{{ names.css_name }} .unity-button {
    border-radius: var({{ names.var_prefix }}-radius);
    background-color: var({{ names.var_prefix }}-surface-color);
    border-color: var({{ names.var_prefix }}-border-color);
}

.{{ names.css_name }} .unity-button:hover {
    background-color: var({{ names.var_prefix }}-accent-color);
}

.{{ names.css_name }} .unity-text-field {
    font-size: var({{ names.var_prefix }}-font-size);
}

.{{ names.css_name }}--success {
    color: var({{ names.var_prefix }}-success-color);
}

.{{ names.css_name }}--warning {
    color: var({{ names.var_prefix }}-warning-color);
}

.{{ names.css_name }}--error {
    color: var({{ names.var_prefix }}-error-color);
}
{% endblock %}
"""

_STYLE_UTILITIES = """\
{% extends "stylesheet/_base.uss" %}
{% block root_rule %}
    flex-grow: 1;
{% endblock %}
{% block rules %}

.{{ names.css_name }}-row {
    flex-direction: row;
}

.{{ names.css_name }}-column {
    flex-direction: column;
}

.{{ names.css_name }}-grow {
    flex-grow: 1;
}

.{{ names.css_name }}-center {
    align-items: center;
    justify-content: center;
}

.{{ names.css_name }}-spaced {
    margin: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}-padded {
    padding: var({{ names.var_prefix }}-spacing);
}

.{{ names.css_name }}-hidden {
    display: none;
}
{% endblock %}
"""

_SCRIPT_BASE = """\
using UnityEngine;
using UnityEngine.UIElements;

/// <summary>
/// Behaviour for the {{ names.title }} UI ({{ variant }}).
/// Bound markup: {{ markup_path }}
/// </summary>
[RequireComponent(typeof(UIDocument))]
public class {{ names.type_name }} : MonoBehaviour
{
    public const string UxmlPath = "{{ markup_path }}";
    public const string RootName = "{{ names.root_name }}";

    private VisualElement root;
{% if has_title %}
    private Label titleLabel;
{% endif %}
{% for a in affordances %}
    private Button {{ a.field }};
{% endfor %}
{% block fields %}{% endblock %}

    public VisualElement Root => root;

    private void OnEnable()
    {
        root = GetComponent<UIDocument>().rootVisualElement.Q<VisualElement>(RootName);
        if (root == null)
        {
            Debug.LogError($"{{ names.type_name }}: element '{RootName}' not found in {UxmlPath}");
            return;
        }
{% if has_title %}

        titleLabel = root.Q<Label>("title");
{% endif %}
{% for a in affordances %}

        {{ a.field }} = root.Q<Button>("{{ a.name }}");
        if ({{ a.field }} != null)
            {{ a.field }}.clicked += {{ a.handler }};
{% endfor %}
{% block bind %}{% endblock %}
    }

    private void OnDisable()
    {
{% for a in affordances %}
        if ({{ a.field }} != null)
            {{ a.field }}.clicked -= {{ a.handler }};
{% endfor %}
    }

    public void Show()
    {
        if (root != null)
            root.style.display = DisplayStyle.Flex;
    }

    public void Hide()
    {
        if (root != null)
            root.style.display = DisplayStyle.None;
    }
{% if has_title %}

    public void SetTitle(string text)
    {
        if (titleLabel != null)
            titleLabel.text = text;
    }
{% endif %}
{% for a in affordances %}

    private void {{ a.handler }}()
    {
        Debug.Log("{{ names.title }}: {{ a.name }} clicked");
{% if a.then %}
        {{ a.then }};
{% endif %}
    }
{% endfor %}
{% block methods %}{% endblock %}
}
"""

_SCRIPT_COMPONENT = """\
{% extends "behavior_script/_base.cs" %}
"""

_SCRIPT_DOCUMENT = """\
{% extends "behavior_script/_base.cs" %}
{% block fields %}
    private VisualElement content;
{% endblock %}
{% block bind %}

        content = root.Q<VisualElement>("content");
{% endblock %}
{% block methods %}

    public void SetContent(VisualElement element)
    {
        if (content == null)
            return;
        content.Clear();
        content.Add(element);
    }
{% endblock %}
"""

_SCRIPT_WINDOW = """\
{% extends "behavior_script/_base.cs" %}
{% block fields %}
    private VisualElement content;

    public event System.Action Confirmed;
{% endblock %}
{% block bind %}

        content = root.Q<VisualElement>("content");
{% endblock %}
{% block methods %}

    public VisualElement Content => content;

    public void Confirm()
    {
        Confirmed?.Invoke();
        Hide();
    }
{% endblock %}
"""

_SCRIPT_PANEL = """\
{% extends "behavior_script/_base.cs" %}
{% block fields %}
    private const string CollapsedClass = "{{ names.css_name }}--collapsed";
    private bool collapsed;
{% endblock %}
{% block methods %}

    public bool Collapsed => collapsed;

    public void ToggleCollapsed()
    {
        collapsed = !collapsed;
        root.EnableInClassList(CollapsedClass, collapsed);
    }
{% endblock %}
"""

_SCRIPT_FORM = """\
{% extends "behavior_script/_base.cs" %}
{% block fields %}
    private TextField nameField;
    private TextField emailField;
    private Toggle agreeToggle;

    public event System.Action<string, string> Submitted;
{% endblock %}
{% block bind %}

        nameField = root.Q<TextField>("name-field");
        emailField = root.Q<TextField>("email-field");
        agreeToggle = root.Q<Toggle>("agree-toggle");
{% endblock %}
{% block methods %}

    public void ResetFields()
    {
        if (nameField != null)
            nameField.value = string.Empty;
        if (emailField != null)
            emailField.value = string.Empty;
        if (agreeToggle != null)
            agreeToggle.value = false;
    }

    public void Submit()
    {
        if (agreeToggle != null && !agreeToggle.value)
        {
            Debug.LogWarning("{{ names.title }}: agreement required");
            return;
        }
        Submitted?.Invoke(nameField?.value, emailField?.value);
    }
{% endblock %}
"""

_SCRIPT_MODAL = """\
{% extends "behavior_script/_base.cs" %}
{% block fields %}
    private Label messageLabel;

    public event System.Action<bool> Closed;
{% endblock %}
{% block bind %}

        messageLabel = root.Q<Label>("message");
{% endblock %}
{% block methods %}

    public void SetMessage(string text)
    {
        if (messageLabel != null)
            messageLabel.text = text;
    }

    public void Close(bool confirmed)
    {
        Hide();
        Closed?.Invoke(confirmed);
    }
{% endblock %}
"""

_SCRIPT_BUTTON = """\
{% extends "behavior_script/_base.cs" %}
{% block fields %}

    public event System.Action Clicked;
{% endblock %}
{% block methods %}

    public void SetText(string text)
    {
        if (clickButton != null)
            clickButton.text = text;
    }
{% endblock %}
"""

TEMPLATES = {
    "markup/_base.uxml": _MARKUP_BASE,
    "markup/document.uxml": _MARKUP_DOCUMENT,
    "markup/window.uxml": _MARKUP_WINDOW,
    "markup/panel.uxml": _MARKUP_PANEL,
    "markup/form.uxml": _MARKUP_FORM,
    "markup/modal.uxml": _MARKUP_MODAL,
    "markup/button.uxml": _MARKUP_BUTTON,
    "stylesheet/_base.uss": _STYLE_BASE,
    "stylesheet/component.uss": _STYLE_COMPONENT,
    "stylesheet/document.uss": _STYLE_DOCUMENT,
    "stylesheet/window.uss": _STYLE_WINDOW,
    "stylesheet/panel.uss": _STYLE_PANEL,
    "stylesheet/form.uss": _STYLE_FORM,
    "stylesheet/modal.uss": _STYLE_MODAL,
    "stylesheet/button.uss": _STYLE_BUTTON,
    "stylesheet/theme.uss": _STYLE_THEME,
    "stylesheet/utilities.uss": _STYLE_UTILITIES,
    "behavior_script/_base.cs": _SCRIPT_BASE,
    "behavior_script/component.cs": _SCRIPT_COMPONENT,
    "behavior_script/document.cs": _SCRIPT_DOCUMENT,
    "behavior_script/window.cs": _SCRIPT_WINDOW,
    "behavior_script/panel.cs": _SCRIPT_PANEL,
    "behavior_script/form.cs": _SCRIPT_FORM,
    "behavior_script/modal.cs": _SCRIPT_MODAL,
    "behavior_script/button.cs": _SCRIPT_BUTTON,
}

_ENV = Environment(
    loader=DictLoader(TEMPLATES),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)


# =============================================================================
# Render Table
# =============================================================================


def _table(kind: AssetKind, *variants: TemplateVariant) -> dict[TemplateVariant, str]:
    ext = kind.extension
    return {v: f"{kind.value}/{v.value}.{ext}" for v in variants}


RENDER_TABLE: dict[AssetKind, dict[TemplateVariant, str]] = {
    AssetKind.MARKUP: _table(
        AssetKind.MARKUP,
        TemplateVariant.DOCUMENT,
        TemplateVariant.WINDOW,
        TemplateVariant.PANEL,
        TemplateVariant.FORM,
        TemplateVariant.MODAL,
        TemplateVariant.BUTTON,
    ),
    AssetKind.STYLESHEET: _table(
        AssetKind.STYLESHEET,
        TemplateVariant.COMPONENT,
        TemplateVariant.DOCUMENT,
        TemplateVariant.WINDOW,
        TemplateVariant.PANEL,
        TemplateVariant.FORM,
        TemplateVariant.MODAL,
        TemplateVariant.BUTTON,
        TemplateVariant.THEME,
        TemplateVariant.UTILITIES,
    ),
    AssetKind.BEHAVIOR_SCRIPT: _table(
        AssetKind.BEHAVIOR_SCRIPT,
        TemplateVariant.COMPONENT,
        TemplateVariant.DOCUMENT,
        TemplateVariant.WINDOW,
        TemplateVariant.PANEL,
        TemplateVariant.FORM,
        TemplateVariant.MODAL,
        TemplateVariant.BUTTON,
    ),
}

DEFAULT_VARIANTS: dict[AssetKind, TemplateVariant] = {
    AssetKind.MARKUP: TemplateVariant.DOCUMENT,
    AssetKind.STYLESHEET: TemplateVariant.COMPONENT,
    AssetKind.BEHAVIOR_SCRIPT: TemplateVariant.COMPONENT,
}


def resolve_variant(
    kind: AssetKind,
    variant: str | TemplateVariant | None,
) -> TemplateVariant:
    """
    요청 변형 → 실제 렌더할 변형.

    custom은 그대로, kind에 없는 변형/모르는 태그는 기본 변형.
    """
    parsed = TemplateVariant.parse(variant)
    if parsed is TemplateVariant.CUSTOM:
        return parsed
    if parsed in RENDER_TABLE[kind]:
        return parsed
    return DEFAULT_VARIANTS[kind]


def available_variants(kind: AssetKind) -> list[str]:
    """kind에서 쓸 수 있는 변형 태그 목록 (custom 포함)."""
    return [v.value for v in RENDER_TABLE[kind]] + [TemplateVariant.CUSTOM.value]


def default_markup_path(stem: str) -> str:
    """단독 uxml 경로 (markup_path 미지정 시 스크립트 바인딩 참조)."""
    return f"{ASSETS_DIR}/{UI_DIR}/{stem}.uxml"


# =============================================================================
# Render
# =============================================================================


def render(
    kind: AssetKind,
    variant: str | TemplateVariant | None,
    logical_name: str,
    custom_body: str | None = None,
    style_src: str | None = None,
    markup_path: str | None = None,
) -> str:
    """
    에셋 본문 렌더.

    Args:
        kind: 에셋 종류
        variant: 변형 태그 (모르면 기본 변형)
        logical_name: 논리 이름 (내부에서 sanitize)
        custom_body: custom 변형일 때 본문 (필수)
        style_src: uxml에 넣을 <Style src> 경로 (markup만 사용)
        markup_path: 스크립트가 바인딩할 uxml 경로 (예: Assets/UI/Hud.uxml, None이면 단독 경로)

    Returns:
        파일 본문

    Raises:
        InvalidParameterError: 이름이 잘못됨, custom 본문 누락
    """
    resolved = resolve_variant(kind, variant)

    if resolved is TemplateVariant.CUSTOM:
        if not isinstance(custom_body, str) or not custom_body.strip():
            raise InvalidParameterError(
                "custom variant requires a non-empty body",
                kind=kind.value,
            )
        return custom_body

    stem = sanitize_name(logical_name, kind.extension)
    template = _ENV.get_template(RENDER_TABLE[kind][resolved])

    return template.render(
        names=UINames.from_stem(stem),
        variant=resolved.value,
        affordances=VARIANT_AFFORDANCES.get(resolved, ()),
        has_title=resolved not in UNTITLED_VARIANTS,
        markup_path=markup_path or default_markup_path(stem),
        style_src=style_src if kind is AssetKind.MARKUP else None,
    )
