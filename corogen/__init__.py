# -*- coding: utf-8 -*-
'''
This is a library for stackful, bidirectional generators built on greenlets.

A generator body is a plain function that receives a `Context`. The body
hands values to its consumer with ``context.yield_(value)`` and gets back
whatever the consumer sends next. Unlike the ``yield`` keyword, ``yield_``
works from any depth of regular function calls - the whole stack of the body
is suspended and later resumed.

::

    Roughly the corogen internals works like this:

    consumer greenlet                      body greenlet
    +---------------------+                +-----------------------------+
    | gen.send(message)---|--switch------->| def body(ctx):              |
    |                     |                |     ...                     |
    |   value <-----------|<---switch------|--- msg = ctx.yield_(value)  |
    | gen.send(message2)--|--switch------->|     ...   (msg = message2)  |
    |                     |                |     ctx.close()             |
    |   Exhausted <-------|<---returns-----| (body returned)             |
    +---------------------+                +-----------------------------+

There are two engines with the same interface:

  - `InlineCoroutine` owns its continuation directly.
  - `RecursiveCoroutine` keeps the continuation in a frame block obtained
    from an allocator, so a body can build and drive coroutines of its own
    type (eg: a tree walk that recurses into the subtrees). The block is
    released with ``dispose()`` or by using the coroutine in a ``with``.
'''

__license__ = u'''
Copyright (c) 2007, Mărieş Ionel Cristian

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
'''

__author__ = u"Mărieş Ionel Cristian"
__email__ = "ionel.mc@gmail.com"
__version__ = '0.3.0'

from corogen import core
from corogen import common
