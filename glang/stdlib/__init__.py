"""Standard library modules: text, math, JSON, time, file I/O, HTTP and arguments."""