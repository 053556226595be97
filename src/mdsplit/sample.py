"""Bundled sample document for trying the splitter."""

SAMPLE_MARKDOWN = """\
# Sample: Markdown splitting demo

Text is split at `#` headings. Depth 3 splits on everything down to `###`.

## Usage
1. Paste Markdown as input
2. Pick a depth (1/2/3)
3. Copy each section from the split view

### Notes
- A `#` inside a code block never splits.
- Code blocks can be copied on their own.

## Code block examples
### JavaScript

```js
function add(a,b){
  return a + b;
}
console.log(add(2,3));
```

### Python

```py
def fib(n):
  a,b=0,1
  for _ in range(n):
    a,b=b,a+b
  return a
print(fib(10))
```

## The end
That is the whole demo.
"""
