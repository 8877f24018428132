"""
Server-side rendering of the storefront header's user menu.

``header.html`` carries a placeholder comment where the menu goes. The
menu depends only on the identity provider's sign-in state, modelled as
``SignedOut`` or ``SignedIn(email)``.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Union

USER_MENU_PLACEHOLDER = "<!-- User menu will be inserted here -->"


@dataclass(frozen=True)
class SignedOut:
    pass


@dataclass(frozen=True)
class SignedIn:
    email: str


AuthState = Union[SignedOut, SignedIn]

_SIGNED_IN_MENU = """
<a href="cart.html" class="relative p-2 hover:bg-gray-100 rounded-lg transition">
  <svg class="w-6 h-6 text-gray-700" fill="none" stroke="currentColor" viewBox="0 0 24 24">
    <path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M3 3h2l.4 2M7 13h10l4-8H5.4m0 0L7 13m0 0l-2.5 5M7 13l2.5 5m6-5v6a2 2 0 01-2 2H9a2 2 0 01-2-2v-6m8 0V9a2 2 0 00-2-2H9a2 2 0 00-2 2v4.01"></path>
  </svg>
  <span id="cartCount" class="absolute -top-1 -right-1 bg-blue-600 text-white text-xs rounded-full w-5 h-5 flex items-center justify-center" style="display: none;">0</span>
</a>
<span class="text-sm font-semibold text-gray-700">👤 {email} 님</span>
<a href="mypage.html" class="border px-3 py-1 rounded-full text-sm hover:bg-gray-100">마이페이지</a>
<button onclick="logout()" class="border px-3 py-1 rounded-full text-sm hover:bg-red-100 text-red-600">로그아웃</button>
"""

_SIGNED_OUT_MENU = """
<a href="login.html" class="border px-3 py-1 rounded-full text-sm hover:bg-gray-100">로그인</a>
<a href="signup.html" class="border px-3 py-1 rounded-full text-sm hover:bg-blue-100 text-blue-600">회원가입</a>
"""


def user_menu(state: AuthState) -> str:
    if isinstance(state, SignedIn):
        return _SIGNED_IN_MENU.format(email=html.escape(state.email))
    return _SIGNED_OUT_MENU


def render_header(template: str, state: AuthState) -> str:
    """Fill the user menu placeholder of ``template`` for ``state``.

    Only the first placeholder is replaced; a template without one is
    returned unchanged.
    """
    return template.replace(USER_MENU_PLACEHOLDER, user_menu(state), 1)
