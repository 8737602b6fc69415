"""Pytest configuration and fixtures."""

import pytest

from domassert.assertions import DOMAssertions
from domassert.scope import SoupScope


PAGE = """
<html>
  <body>
    <div id="app">
      <h2 id="title">
        Welcome to <b>QUnit</b>
      </h2>
      <p class="multi">a

b</p>
      <ul id="menu">
        <li class="choice">One</li>
        <li class="choice">Two</li>
        <li class="choice">Three</li>
        <li class="choice">Four</li>
      </ul>
      <input class="username form-control" value="HSimpson">
      <input class="spaced" value="a  b">
      <input type="password" class="secret-password-input">
      <input class="email">
      <input type="checkbox" id="agree">
      <textarea id="bio">Hello
world</textarea>
      <select id="color">
        <option value="r">Red</option>
        <option value="g" selected>Green</option>
      </select>
      <span class="xyz">Copyright 2017</span>
    </div>
    <div id="footer">
      <p class="note">Footer</p>
    </div>
  </body>
</html>
"""


@pytest.fixture
def scope():
    return SoupScope.from_html(PAGE)


@pytest.fixture
def results():
    """Result sink: every pushed AssertionResult lands in this list."""
    return []


@pytest.fixture
def dom(scope, results):
    """Build DOMAssertions bound to the sample page and the results list."""
    def factory(target):
        return DOMAssertions(target, scope, results.append)
    return factory
