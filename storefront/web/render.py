"""
HTML rendering for the storefront and the admin console.

Pages are plain f-string templates. Every value coming from the database is
passed through ``html.escape`` before it is interpolated; records handed to
the admin scripts travel as escaped JSON in ``data-record`` attributes.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Any, Dict, List, Optional, Sequence, Tuple
import json

from storefront.models.product import BadgeColor
from storefront.web.content import (
    FAQ_FALLBACK,
    HERO_FALLBACK,
    LOCATION_FALLBACK,
    STORY_MILESTONES,
    STORY_PARAGRAPHS,
)

TOKEN_STORAGE_KEY = "storefront_admin_token"

Choices = Dict[str, List[Tuple[str, str]]]


@dataclass
class FormField:
    name: str
    label: str
    kind: str = "text"  # text, textarea, number, url, list, select, image
    nullable: bool = False
    required: bool = False
    options: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class AdminSection:
    slug: str
    title: str
    endpoint: str
    columns: List[Tuple[str, str]]
    fields: List[FormField]


ADMIN_SECTIONS: Dict[str, AdminSection] = {
    section.slug: section for section in [
        AdminSection(
            slug="products",
            title="Products",
            endpoint="/api/products",
            columns=[("title", "Title"), ("category.name", "Category"), ("badge_text", "Badge")],
            fields=[
                FormField("title", "Title", required=True),
                FormField("description", "Description", "textarea", required=True),
                FormField("category_id", "Category", "select", nullable=True),
                FormField("main_image_url", "Main image", "image", required=True),
                FormField("gallery_image_urls", "Gallery image URLs (one per line)", "list"),
                FormField("badge_text", "Badge text", nullable=True),
                FormField(
                    "badge_color", "Badge color", "select", nullable=True,
                    options=[(color.value, color.value.title()) for color in BadgeColor],
                ),
                FormField("badge_icon", "Badge icon", nullable=True),
            ],
        ),
        AdminSection(
            slug="categories",
            title="Categories",
            endpoint="/api/categories",
            columns=[("name", "Name")],
            fields=[FormField("name", "Name", required=True)],
        ),
        AdminSection(
            slug="menu-items",
            title="Menu Items",
            endpoint="/api/menu-items",
            columns=[("name", "Name"), ("category.name", "Category"), ("product.title", "Product"), ("price", "Price")],
            fields=[
                FormField("name", "Name", required=True),
                FormField("description", "Description", "textarea", required=True),
                FormField("price", "Price", "number", required=True),
                FormField("product_id", "Product", "select", nullable=True),
                FormField("category_id", "Category", "select", nullable=True),
            ],
        ),
        AdminSection(
            slug="faqs",
            title="FAQs",
            endpoint="/api/faqs",
            columns=[("question", "Question"), ("answer", "Answer")],
            fields=[
                FormField("question", "Question", required=True),
                FormField("answer", "Answer", "textarea", required=True),
            ],
        ),
        AdminSection(
            slug="customisation",
            title="Customisation",
            endpoint="/api/misc-content",
            columns=[("section", "Section"), ("large_text", "Large text"), ("small_text", "Small text")],
            fields=[
                FormField("section", "Section", required=True),
                FormField("image_url", "Image", "image", nullable=True),
                FormField("icon", "Icon", nullable=True),
                FormField("large_text", "Large text", nullable=True),
                FormField("small_text", "Small text", nullable=True),
                FormField("message", "Message", "textarea", nullable=True),
            ],
        ),
        AdminSection(
            slug="our-story",
            title="Our Story",
            endpoint="/api/image-messages",
            columns=[("message", "Message"), ("icon", "Icon")],
            fields=[
                FormField("image_url", "Image", "image", required=True),
                FormField("message", "Message", "textarea", required=True),
                FormField("icon", "Icon", required=True),
            ],
        ),
    ]
}

BASE_STYLE = """
    body { margin: 0; font-family: Georgia, 'Times New Roman', serif; background: #faf6f0; color: #5c3a21; }
    a { color: #5c3a21; }
    header.site { display: flex; justify-content: space-between; align-items: center; padding: 16px 32px; background: #f3e9dc; }
    section { padding: 48px 32px; max-width: 1100px; margin: 0 auto; }
    h2 { font-size: 2rem; margin: 0 0 16px; }
    .badge { display: inline-block; padding: 4px 12px; border-radius: 999px; background: #dfe6d5; font-size: 0.85rem; }
    .badge-caramel { background: #d6a77a; color: #fff; }
    .badge-sage { background: #a3b18a; color: #fff; }
    .badge-chocolate { background: #5c3a21; color: #fff; }
    .badge-beige { background: #e8dcc8; }
    .badge-cream { background: #fff8e7; }
    .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 24px; }
    .card { background: #fff; border-radius: 12px; padding: 16px; box-shadow: 0 2px 8px rgba(92, 58, 33, 0.1); }
    .card img { width: 100%; border-radius: 8px; object-fit: cover; max-height: 200px; }
    .carousel { display: flex; gap: 24px; overflow-x: auto; scroll-snap-type: x mandatory; }
    .carousel .card { min-width: 260px; scroll-snap-align: start; }
    .stars { color: #d6a77a; }
    .muted { opacity: 0.7; }
    details { background: #fff; border-radius: 8px; padding: 12px 16px; margin-bottom: 12px; }
    summary { cursor: pointer; font-weight: bold; }
    table { width: 100%; border-collapse: collapse; background: #fff; }
    th, td { text-align: left; padding: 8px; border-bottom: 1px solid #eee; vertical-align: top; }
    form.admin label { display: block; margin-top: 12px; font-weight: bold; }
    form.admin input, form.admin textarea, form.admin select { width: 100%; padding: 8px; box-sizing: border-box; }
    button { background: #d6a77a; color: #fff; border: none; padding: 8px 16px; border-radius: 6px; cursor: pointer; }
    button.secondary { background: #a3b18a; }
    button.danger { background: #b5523b; }
    nav.admin a { margin-right: 16px; }
    .error { color: #b5523b; white-space: pre-line; }
"""


def _e(value: Any) -> str:
    return escape("" if value is None else str(value))


def _lines(value: Optional[str]) -> str:
    return "<br>".join(_e(line) for line in (value or "").splitlines())


def lookup(record: Dict[str, Any], key: str) -> Any:
    """Resolve a dotted key such as ``category.name`` against nested dicts"""
    value: Any = record
    for part in key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def render_page(title: str, body: str, script: str = "", body_attrs: str = "") -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{_e(title)}</title>
    <style>{BASE_STYLE}</style>
</head>
<body{body_attrs}>
{body}
{f"<script>{script}</script>" if script else ""}
</body>
</html>"""


# Storefront sections

def render_hero(hero: Sequence[Dict[str, Any]]) -> str:
    intro = f"""
        <span class="badge">{_e(HERO_FALLBACK["badge"])}</span>
        <h1>{_e(HERO_FALLBACK["title"])} <span style="color: #d6a77a">{_e(HERO_FALLBACK["highlight"])}</span></h1>"""

    if not hero:
        return f"""<section id="hero">{intro}
        <p>{_e(HERO_FALLBACK["message"])}</p>
        <div class="card"><strong>{_e(HERO_FALLBACK["large_text"])}</strong>
            <p class="muted">{_e(HERO_FALLBACK["small_text"])}</p></div>
    </section>"""

    slides = []
    for item in hero:
        image = f'<img src="{_e(item.get("image_url"))}" alt="{_e(item.get("large_text") or "Hero image")}">' if item.get("image_url") else ""
        slides.append(f"""<div class="card">{image}
            <strong>{_e(item.get("large_text"))}</strong>
            <p class="muted">{_e(item.get("small_text") or HERO_FALLBACK["small_text"])}</p>
            {f"<p>{_e(item['message'])}</p>" if item.get("message") else ""}
        </div>""")

    return f"""<section id="hero">{intro}
        <p>{_e(hero[0].get("message") or HERO_FALLBACK["message"])}</p>
        <div class="carousel">{"".join(slides)}</div>
    </section>"""


def render_products(products: Sequence[Dict[str, Any]]) -> str:
    if not products:
        cards = '<p class="muted">Our display cabinet is being restocked. Check back soon for fresh bakes.</p>'
    else:
        items = []
        for product in products:
            badge = ""
            if product.get("badge_text"):
                color = product.get("badge_color") or "caramel"
                badge = f'<span class="badge badge-{_e(color)}">{_e(product["badge_text"])}</span>'
            category = lookup(product, "category.name")
            items.append(f"""<div class="card">
                <img src="{_e(product.get("main_image_url"))}" alt="{_e(product.get("title"))}">
                {badge}
                <h3>{_e(product.get("title"))}</h3>
                {f'<p class="muted">{_e(category)}</p>' if category else ""}
                <p>{_e(product.get("description"))}</p>
            </div>""")
        cards = f'<div class="carousel">{"".join(items)}</div>'

    return f"""<section id="products">
        <h2>Our Delights</h2>
        {cards}
    </section>"""


def render_our_story(story: Sequence[Dict[str, Any]], image_messages: Sequence[Dict[str, Any]]) -> str:
    paragraphs = [item["message"] for item in story if item.get("message")] or STORY_PARAGRAPHS
    milestones = "".join(
        f'<li><strong>{_e(year)}</strong> {_e(title)}<p class="muted">{_e(text)}</p></li>'
        for year, title, text in STORY_MILESTONES
    )
    gallery = ""
    if image_messages:
        gallery = '<div class="grid">' + "".join(
            f"""<div class="card"><img src="{_e(item.get("image_url"))}" alt="">
                <p>{_e(item.get("message"))}</p></div>"""
            for item in image_messages
        ) + "</div>"

    return f"""<section id="our-story">
        <h2>Our Story</h2>
        {"".join(f"<p>{_e(text)}</p>" for text in paragraphs)}
        {gallery}
        <h3>Our Journey</h3>
        <ul>{milestones}</ul>
    </section>"""


def render_faqs(faqs: Sequence[Dict[str, Any]]) -> str:
    entries = faqs or FAQ_FALLBACK
    items = "".join(
        f"<details><summary>{_e(faq.get('question'))}</summary><p>{_e(faq.get('answer'))}</p></details>"
        for faq in entries
    )
    return f"""<section id="faq">
        <h2>Frequently Asked Questions</h2>
        {items}
    </section>"""


def render_location(location: Sequence[Dict[str, Any]]) -> str:
    if location:
        entries = [
            (item.get("icon"), item.get("large_text"), item.get("small_text") or item.get("message"))
            for item in location
        ]
    else:
        entries = LOCATION_FALLBACK

    cards = "".join(
        f'<div class="card" data-icon="{_e(icon)}"><h4>{_e(title)}</h4><p>{_lines(text)}</p></div>'
        for icon, title, text in entries
    )
    return f"""<section id="location">
        <h2>Visit Us in Vasse Village</h2>
        <div class="grid">{cards}</div>
    </section>"""


def render_reviews(reviews: Dict[str, Any]) -> str:
    cards = "".join(
        f"""<div class="card">
            <span class="stars">{"&#9733;" * int(review.get("rating", 0))}</span>
            <p>{_e(review.get("text"))}</p>
            <p class="muted">{_e(review.get("author_name"))} &middot; {_e(review.get("date"))}</p>
        </div>"""
        for review in reviews.get("reviews", [])
    )
    return f"""<section id="reviews">
        <h2>What Our Customers Say</h2>
        <p><strong>{_e(reviews.get("overall_rating"))}</strong> / 5 from {_e(reviews.get("total_reviews"))} reviews</p>
        <div class="grid">{cards}</div>
    </section>"""


def render_storefront(
    hero: Sequence[Dict[str, Any]],
    products: Sequence[Dict[str, Any]],
    story: Sequence[Dict[str, Any]],
    image_messages: Sequence[Dict[str, Any]],
    faqs: Sequence[Dict[str, Any]],
    location: Sequence[Dict[str, Any]],
    reviews: Dict[str, Any],
    app_name: str,
) -> str:
    body = f"""<header class="site"><strong>{_e(app_name)}</strong>
    <nav><a href="#products">Products</a> <a href="#our-story">Our Story</a> <a href="#faq">FAQ</a>
    <a href="#location">Location</a> <a href="#reviews">Reviews</a></nav></header>
{render_hero(hero)}
{render_products(products)}
{render_our_story(story, image_messages)}
{render_faqs(faqs)}
{render_location(location)}
{render_reviews(reviews)}"""
    return render_page(app_name, body)


# Admin console

LOGIN_SCRIPT = f"""
document.getElementById("login-form").addEventListener("submit", async (event) => {{
    event.preventDefault();
    const form = event.target;
    const error = document.getElementById("error");
    error.textContent = "";
    const res = await fetch("/api/auth/login", {{
        method: "POST",
        headers: {{"Content-Type": "application/json"}},
        body: JSON.stringify({{email: form.email.value, password: form.password.value}}),
    }});
    const data = await res.json().catch(() => ({{}}));
    if (!res.ok) {{
        error.textContent = data.error || "Login failed";
        return;
    }}
    localStorage.setItem("{TOKEN_STORAGE_KEY}", data.access_token);
    window.location.href = "/admin";
}});
"""

ADMIN_SCRIPT = f"""
const TOKEN_KEY = "{TOKEN_STORAGE_KEY}";
const token = () => localStorage.getItem(TOKEN_KEY);
if (!token()) window.location.href = "/admin/login";

function logout() {{
    localStorage.removeItem(TOKEN_KEY);
    window.location.href = "/admin/login";
}}

async function api(method, url, body) {{
    const options = {{method, headers: {{"Authorization": "Bearer " + token()}}}};
    if (body instanceof FormData) {{
        options.body = body;
    }} else if (body !== undefined) {{
        options.headers["Content-Type"] = "application/json";
        options.body = JSON.stringify(body);
    }}
    const res = await fetch(url, options);
    if (res.status === 401) {{
        logout();
        return null;
    }}
    const data = await res.json().catch(() => ({{}}));
    if (!res.ok) {{
        const details = (data.details || []).map((d) => d.field + ": " + d.message).join("\\n");
        throw new Error((data.error || "Request failed") + (details ? "\\n" + details : ""));
    }}
    return data;
}}

const form = document.getElementById("record-form");
const errorBox = document.getElementById("error");
const endpoint = document.body.dataset.endpoint;
let editingId = null;

if (form) {{
    form.addEventListener("submit", async (event) => {{
        event.preventDefault();
        errorBox.textContent = "";
        const body = {{}};
        for (const el of form.elements) {{
            if (!el.name) continue;
            const value = el.value.trim();
            if (el.dataset.kind === "list") {{
                body[el.name] = value.split(/\\n+/).map((v) => v.trim()).filter(Boolean);
            }} else if (value === "") {{
                if (editingId && el.dataset.nullable === "true") body[el.name] = null;
            }} else if (el.dataset.kind === "number") {{
                body[el.name] = parseFloat(value);
            }} else {{
                body[el.name] = value;
            }}
        }}
        try {{
            if (editingId) {{
                await api("PUT", endpoint + "/" + editingId, body);
            }} else {{
                await api("POST", endpoint, body);
            }}
            window.location.reload();
        }} catch (err) {{
            errorBox.textContent = err.message;
        }}
    }});

    document.getElementById("reset-form").addEventListener("click", () => {{
        editingId = null;
        form.reset();
        document.getElementById("submit-label").textContent = "Create";
    }});
}}

document.querySelectorAll("button[data-edit]").forEach((button) => {{
    button.addEventListener("click", () => {{
        const record = JSON.parse(button.closest("tr").dataset.record);
        editingId = record.id;
        for (const el of form.elements) {{
            if (!el.name) continue;
            const value = record[el.name];
            el.value = Array.isArray(value) ? value.join("\\n") : (value ?? "");
        }}
        document.getElementById("submit-label").textContent = "Update";
        form.scrollIntoView();
    }});
}});

document.querySelectorAll("button[data-delete]").forEach((button) => {{
    button.addEventListener("click", async () => {{
        const record = JSON.parse(button.closest("tr").dataset.record);
        if (!confirm("Delete this record?")) return;
        try {{
            await api("DELETE", endpoint + "/" + record.id);
            window.location.reload();
        }} catch (err) {{
            errorBox.textContent = err.message;
        }}
    }});
}});

document.querySelectorAll("input[type=file][data-target]").forEach((input) => {{
    input.addEventListener("change", async () => {{
        if (!input.files.length) return;
        const payload = new FormData();
        payload.append("file", input.files[0]);
        try {{
            const data = await api("POST", "/api/upload", payload);
            if (data) document.querySelector("[name='" + input.dataset.target + "']").value = data.url;
        }} catch (err) {{
            errorBox.textContent = err.message;
        }}
    }});
}});

const search = document.getElementById("search");
if (search) {{
    search.addEventListener("input", () => {{
        const query = search.value.trim().toLowerCase();
        document.querySelectorAll("tr[data-record]").forEach((row) => {{
            // last cell holds the Edit/Delete buttons
            const text = [...row.cells].slice(0, -1).map((cell) => cell.textContent).join(" ");
            row.style.display = text.toLowerCase().includes(query) ? "" : "none";
        }});
    }});
}}
"""


def render_login_page(app_name: str) -> str:
    body = f"""<section style="max-width: 420px">
    <h2>{_e(app_name)} Admin</h2>
    <form id="login-form" class="admin">
        <label for="email">Email</label>
        <input id="email" name="email" type="email" required>
        <label for="password">Password</label>
        <input id="password" name="password" type="password" required>
        <p><button type="submit">Sign in</button></p>
        <p id="error" class="error"></p>
    </form>
</section>"""
    return render_page(f"{app_name} Admin Login", body, LOGIN_SCRIPT)


def _admin_nav(active: Optional[str]) -> str:
    links = []
    for slug, section in ADMIN_SECTIONS.items():
        style = ' style="font-weight: bold"' if slug == active else ""
        links.append(f'<a href="/admin/{slug}"{style}>{_e(section.title)}</a>')
    links = "".join(links)
    return f"""<header class="site"><strong><a href="/admin">Admin</a></strong>
    <nav class="admin">{links}<button class="secondary" onclick="logout()">Log out</button></nav></header>"""


def _render_field(form_field: FormField, choices: Choices) -> str:
    attrs = f'name="{form_field.name}" data-kind="{form_field.kind}" data-nullable="{str(form_field.nullable).lower()}"'
    if form_field.required:
        attrs += " required"
    label = f'<label for="{form_field.name}">{_e(form_field.label)}</label>'

    if form_field.kind == "textarea" or form_field.kind == "list":
        control = f'<textarea id="{form_field.name}" {attrs} rows="3"></textarea>'
    elif form_field.kind == "select":
        options = form_field.options or choices.get(form_field.name, [])
        rendered = "".join(f'<option value="{_e(value)}">{_e(text)}</option>' for value, text in options)
        control = f'<select id="{form_field.name}" {attrs}><option value="">None</option>{rendered}</select>'
    elif form_field.kind == "number":
        control = f'<input id="{form_field.name}" {attrs} type="number" step="0.01" min="0.01">'
    elif form_field.kind == "image":
        control = (
            f'<input id="{form_field.name}" {attrs} type="url">'
            f'<input type="file" accept="image/*" data-target="{form_field.name}">'
        )
    else:
        control = f'<input id="{form_field.name}" {attrs} type="text">'

    return label + control


def render_admin_dashboard(app_name: str, counts: Dict[str, int]) -> str:
    cards = "".join(
        f"""<a class="card" href="/admin/{slug}"><h3>{_e(ADMIN_SECTIONS[slug].title)}</h3>
            <p class="muted">{count} record{"" if count == 1 else "s"}</p></a>"""
        for slug, count in counts.items()
    )
    body = f"""{_admin_nav(None)}
<section>
    <h2>{_e(app_name)} Dashboard</h2>
    <div class="grid">{cards}</div>
</section>"""
    return render_page(f"{app_name} Admin", body, ADMIN_SCRIPT)


def render_admin_section(
    section: AdminSection,
    records: Sequence[Dict[str, Any]],
    choices: Optional[Choices] = None,
) -> str:
    choices = choices or {}
    header = "".join(f"<th>{_e(label)}</th>" for _, label in section.columns)

    rows = []
    for record in records:
        cells = "".join(f"<td>{_e(lookup(record, key))}</td>" for key, _ in section.columns)
        rows.append(
            f'<tr data-record="{escape(json.dumps(record))}">{cells}'
            f'<td><button class="secondary" data-edit>Edit</button> '
            f'<button class="danger" data-delete>Delete</button></td></tr>'
        )
    if not rows:
        rows.append(f'<tr><td colspan="{len(section.columns) + 1}" class="muted">No records yet</td></tr>')

    fields = "".join(_render_field(form_field, choices) for form_field in section.fields)
    body = f"""{_admin_nav(section.slug)}
<section>
    <h2>{_e(section.title)}</h2>
    <input id="search" type="search" placeholder="Search {_e(section.title.lower())}" style="width: 100%; padding: 8px; margin-bottom: 16px">
    <table>
        <thead><tr>{header}<th></th></tr></thead>
        <tbody>{"".join(rows)}</tbody>
    </table>
</section>
<section>
    <form id="record-form" class="admin">
        {fields}
        <p><button type="submit" id="submit-label">Create</button>
        <button type="button" class="secondary" id="reset-form">Clear</button></p>
        <p id="error" class="error"></p>
    </form>
</section>"""
    return render_page(
        f"{section.title} | Admin",
        body,
        ADMIN_SCRIPT,
        body_attrs=f' data-endpoint="{_e(section.endpoint)}"',
    )
