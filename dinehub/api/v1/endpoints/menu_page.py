import json
from html import escape
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.config import settings
from dinehub.core.database import get_db
from dinehub.core.exceptions import NotFoundError
from dinehub.services.menu_service import badges, display_price
from dinehub.services.public_menu_service import PublicMenuView, public_menu_service
from dinehub.services.theme_service import DEFAULT_THEME, Theme

router = APIRouter(tags=["Public Menu"])

BADGE_STYLES = {
    "Bestseller": ("#FFEDD5", "#C2410C", "\U0001F525"),
    "Chef's Pick": ("#EDE9FE", "#6D28D9", "\U0001F468\u200D\U0001F373"),
    "Today's Special": ("#D1FAE5", "#047857", "\u2B50"),
}

_STYLE = """
        * {{ box-sizing: border-box; }}
        body {{ margin: 0; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: {bg}; color: #111827; padding-bottom: 96px; }}
        .hero {{ position: relative; height: 240px; background: linear-gradient(135deg, {header_from}, {header_to}); overflow: hidden; color: white; }}
        .hero img {{ width: 100%; height: 100%; object-fit: cover; opacity: 0.4; }}
        .hero .pattern {{ position: absolute; inset: 0; display: flex; align-items: center; justify-content: center; font-size: 4rem; opacity: 0.1; user-select: none; }}
        .hero .info {{ position: absolute; left: 0; right: 0; bottom: 0; padding: 24px; background: linear-gradient(0deg, rgba(0,0,0,0.7), transparent); }}
        .hero h1 {{ margin: 4px 0; font-size: 2rem; }}
        .hero p {{ margin: 0; opacity: 0.75; max-width: 40rem; }}
        .pill {{ display: inline-block; padding: 4px 12px; border-radius: 999px; font-size: 0.7rem; font-weight: 700; text-transform: uppercase; letter-spacing: 0.05em; }}
        .cuisine {{ background: {badge_bg}; color: {badge_text}; }}
        .table {{ margin-top: 8px; background: rgba(255,255,255,0.2); }}
        main {{ max-width: 56rem; margin: -20px auto 0; position: relative; background: white; border-radius: 24px 24px 0 0; box-shadow: 0 10px 30px rgba(0,0,0,0.1); min-height: 400px; }}
        nav {{ display: flex; gap: 4px; overflow-x: auto; padding: 16px 16px 0; border-bottom: 1px solid #F3F4F6; }}
        nav button {{ background: none; border: none; border-bottom: 2px solid transparent; padding: 12px 18px; font-size: 0.9rem; color: #6B7280; cursor: pointer; }}
        nav button.active {{ color: {accent}; border-color: {accent}; font-weight: 700; }}
        .items {{ padding: 16px 24px; }}
        .item {{ display: flex; gap: 16px; padding: 12px; border-radius: 12px; }}
        .item:hover {{ background: #F9FAFB; }}
        .item .body {{ flex: 1; min-width: 0; }}
        .item h3 {{ display: inline; margin: 0 6px 0 0; font-size: 1rem; }}
        .item .desc {{ color: #6B7280; font-size: 0.8rem; margin: 4px 0; }}
        .item .row {{ display: flex; justify-content: space-between; align-items: center; margin-top: 8px; }}
        .item .price {{ color: {accent}; font-weight: 700; font-size: 0.9rem; }}
        .item img {{ width: 80px; height: 80px; object-fit: cover; border-radius: 12px; }}
        .item.unavailable {{ opacity: 0.5; }}
        .badge {{ font-size: 0.6rem; padding: 2px 8px; margin-right: 4px; }}
        .add {{ border: 1px solid #E5E7EB; background: white; border-radius: 999px; padding: 6px 12px; font-size: 0.75rem; font-weight: 600; cursor: pointer; }}
        .qty {{ display: inline-flex; align-items: center; gap: 8px; background: #F3F4F6; border-radius: 999px; padding: 2px 4px; }}
        .qty button {{ width: 28px; height: 28px; border-radius: 999px; border: none; background: transparent; cursor: pointer; }}
        .cart-bar {{ position: fixed; left: 0; right: 0; bottom: 0; padding: 16px; display: none; }}
        .cart-bar button {{ width: 100%; max-width: 56rem; margin: 0 auto; display: flex; justify-content: space-between; padding: 16px 24px; border: none; border-radius: 16px; background: {accent}; color: white; font-weight: 700; font-size: 1rem; cursor: pointer; }}
        .drawer {{ position: fixed; left: 0; right: 0; bottom: 0; max-height: 70vh; overflow: auto; background: white; border-radius: 24px 24px 0 0; box-shadow: 0 -10px 30px rgba(0,0,0,0.2); padding: 24px; display: none; }}
        .drawer .line {{ display: flex; justify-content: space-between; align-items: center; margin-bottom: 12px; }}
        .drawer .total {{ display: flex; justify-content: space-between; border-top: 1px solid #E5E7EB; padding-top: 16px; font-weight: 700; font-size: 1.1rem; }}
        .drawer .place {{ width: 100%; margin-top: 16px; padding: 16px; border: none; border-radius: 16px; background: {accent}; color: white; font-weight: 700; font-size: 1.1rem; cursor: pointer; }}
        .empty {{ text-align: center; padding: 48px; color: #9CA3AF; }}
        footer {{ text-align: center; padding: 24px; color: #9CA3AF; font-size: 0.75rem; }}
"""

# Mirrors dinehub.services.menu_service.Cart; the cart never leaves the browser.
_CART_SCRIPT = """
    (function () {
        const data = JSON.parse(document.getElementById('menu-data').textContent);
        let cart = [];

        function addToCart(item) {
            const existing = cart.find(c => c.id === item.id);
            if (existing) return changeQuantity(item.id, 1);
            cart = cart.concat([{ id: item.id, name: item.name, price: item.price, qty: 1 }]);
        }
        function changeQuantity(id, delta) {
            cart = cart.map(c => c.id === id ? Object.assign({}, c, { qty: c.qty + delta }) : c)
                       .filter(c => c.qty > 0);
        }
        function cartCount() { return cart.reduce((sum, c) => sum + c.qty, 0); }
        // Exact decimal sum, rounded half-up to cents once at the end.
        function priceDigits(price) {
            const match = String(price).replace(/[^0-9.]/g, '').match(/^(\\d+(?:\\.\\d*)?|\\.\\d+)/);
            if (!match) return { digits: 0n, scale: 0 };
            const parts = match[0].split('.');
            const fraction = parts[1] || '';
            return { digits: BigInt((parts[0] || '0') + fraction), scale: fraction.length };
        }
        function amount(entries) {
            const parsed = entries.map(c => Object.assign(priceDigits(c.price), { qty: c.qty }));
            const scale = Math.max(2, ...parsed.map(p => p.scale));
            const sum = parsed.reduce((acc, p) => acc + p.digits * 10n ** BigInt(scale - p.scale) * BigInt(p.qty), 0n);
            const step = 10n ** BigInt(scale - 2);
            const cents = ((sum + step / 2n) / step).toString().padStart(3, '0');
            return cents.slice(0, -2) + '.' + cents.slice(-2);
        }
        function cartTotal() { return amount(cart); }

        function controls(id) {
            const entry = cart.find(c => c.id === id);
            if (!entry) return '<button class="add" data-add="' + id + '">+ Add</button>';
            return '<span class="qty"><button data-delta="-1" data-id="' + id + '">&minus;</button>' +
                   '<b>' + entry.qty + '</b><button data-delta="1" data-id="' + id + '">+</button></span>';
        }
        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text;
            return div.innerHTML;
        }
        function render() {
            document.querySelectorAll('[data-controls]').forEach(el => {
                el.innerHTML = controls(Number(el.dataset.controls));
            });
            const bar = document.getElementById('cart-bar');
            const count = cartCount();
            bar.style.display = count > 0 ? 'block' : 'none';
            document.getElementById('cart-count').textContent = count + ' item' + (count !== 1 ? 's' : '');
            document.getElementById('cart-total').textContent = '$' + cartTotal();
            document.getElementById('drawer-total').textContent = '$' + cartTotal();
            document.getElementById('drawer-lines').innerHTML = cart.map(c =>
                '<div class="line"><div><b>' + escapeHtml(c.name) + '</b><br><small>$' +
                amount([{ price: c.price, qty: 1 }]) + ' each</small></div>' + controls(c.id) +
                '<b>$' + amount([c]) + '</b></div>').join('');
            if (count === 0) document.getElementById('drawer').style.display = 'none';
        }

        document.addEventListener('click', function (event) {
            const target = event.target.closest('button');
            if (!target) return;
            if (target.dataset.add) {
                const item = data.items[target.dataset.add];
                addToCart(item);
            } else if (target.dataset.delta) {
                changeQuantity(Number(target.dataset.id), Number(target.dataset.delta));
            } else if (target.dataset.category) {
                const category = target.dataset.category;
                document.querySelectorAll('nav button').forEach(b => b.classList.toggle('active', b === target));
                document.querySelectorAll('.item').forEach(el => {
                    el.style.display = category === 'All' || el.dataset.category === category ? 'flex' : 'none';
                });
                return;
            } else if (target.id === 'open-cart') {
                const drawer = document.getElementById('drawer');
                drawer.style.display = drawer.style.display === 'block' ? 'none' : 'block';
                return;
            } else if (target.id === 'place-order') {
                alert('Order placed! ' + cartCount() + ' items for $' + cartTotal() +
                      (data.table ? ' at Table ' + data.table : ''));
                cart = [];
            } else {
                return;
            }
            render();
        });
        render();
    })();
"""


def _page(title: str, theme: Theme, body: str, script: str = "") -> str:
    style = _STYLE.format(
        bg=theme.background,
        header_from=theme.header_from,
        header_to=theme.header_to,
        accent=theme.accent,
        badge_bg=theme.badge_bg,
        badge_text=theme.badge_text,
    )
    return f'''<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>{style}</style>
</head>
<body>
{body}
{script}
</body>
</html>'''


def render_not_found() -> str:
    body = '''<main style="margin-top: 80px; text-align: center; padding: 48px;">
        <h1>Menu Not Found</h1>
        <p style="color: #6B7280;">This restaurant may not have published their menu yet.</p>
    </main>'''
    return _page("Menu Not Found", DEFAULT_THEME, body)


def _render_item(item, label: str) -> str:
    badge_html = "".join(
        f'<span class="pill badge" style="background: {BADGE_STYLES[b][0]}; color: {BADGE_STYLES[b][1]};">'
        f'{BADGE_STYLES[b][2]} {escape(b)}</span>'
        for b in badges(item)
    )
    image = f'<img src="{escape(item.image_url)}" alt="{escape(item.name)}">' if item.image_url else ""
    controls = f'<span data-controls="{item.id}"></span>' if item.is_available else "<small>Unavailable</small>"
    css_class = "item" if item.is_available else "item unavailable"
    return f'''
            <div class="{css_class}" data-category="{escape(label)}">
                <div class="body">
                    <h3>{escape(item.name)}</h3>{badge_html}
                    <p class="desc">{escape(item.description or "")}</p>
                    <div class="row">
                        <span class="price">{escape(display_price(item.price))}</span>
                        {controls}
                    </div>
                </div>
                {image}
            </div>'''


def render_menu_page(view: PublicMenuView) -> str:
    restaurant = view.restaurant
    theme = view.theme
    if not view.has_menus:
        return render_not_found()

    cover = (
        f'<img src="{escape(restaurant.cover_image)}" alt="{escape(restaurant.name)}">'
        if restaurant.cover_image
        else f'<div class="pattern">{"  ".join([theme.pattern] * 12)}</div>'
    )
    cuisine = f'<span class="pill cuisine">{escape(restaurant.cuisine_type)}</span>' if restaurant.cuisine_type else ""
    table = f'<br><span class="pill table">Table {escape(view.table)}</span>' if view.table else ""

    tabs = ['<button class="active" data-category="All">All</button>']
    sections = []
    for label, items in view.categories.items():
        tabs.append(f'<button data-category="{escape(label)}">{escape(label)}</button>')
        for item in items:
            sections.append(_render_item(item, label))
    if not sections:
        sections.append('<p class="empty">No items found in this category.</p>')

    data = {
        "table": view.table,
        "items": {
            str(item.id): {"id": item.id, "name": item.name, "price": item.price}
            for item in view.default_menu.items
        },
    }
    data_json = json.dumps(data).replace("</", "<\\/")

    body = f'''
    <header class="hero">
        {cover}
        <div class="info">
            {cuisine}
            <h1>{escape(restaurant.name)}</h1>
            <p>{escape(restaurant.description or "")}</p>
            {table}
        </div>
    </header>
    <main>
        <nav>{"".join(tabs)}</nav>
        <section class="items">{"".join(sections)}
        </section>
    </main>
    <footer>Powered by <b>{escape(settings.PROJECT_NAME)}</b></footer>

    <div class="cart-bar" id="cart-bar">
        <button id="open-cart"><span id="cart-count"></span><span id="cart-total"></span></button>
    </div>
    <div class="drawer" id="drawer">
        <h2>Your Order</h2>
        {f"<p>Table {escape(view.table)}</p>" if view.table else ""}
        <div id="drawer-lines"></div>
        <div class="total"><span>Total</span><span id="drawer-total"></span></div>
        <button class="place" id="place-order">Place Order</button>
    </div>'''

    script = f'''<script type="application/json" id="menu-data">{data_json}</script>
    <script>{_CART_SCRIPT}</script>'''
    return _page(f"{restaurant.name} Menu", theme, body, script)


@router.get("/menu/{slug}", response_class=HTMLResponse)
async def public_menu_page(
    slug: str,
    table: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    try:
        view = await public_menu_service.resolve(db, slug, table)
    except NotFoundError:
        return HTMLResponse(content=render_not_found(), status_code=404)
    return HTMLResponse(content=render_menu_page(view))
