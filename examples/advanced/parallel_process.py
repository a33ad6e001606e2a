"""One shared processor, 1000 docs, 8 threads."""

from concurrent.futures import ThreadPoolExecutor

from linemark import LineProcessor, markdown_config

processor = LineProcessor.from_config(markdown_config())
docs = ["# Doc " + str(i) + "\n\nContent for document " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(processor.process_document, docs))

print(f"Processed {len(results)} documents in parallel")
print("First doc lines:", len(results[0]))
print("Last doc lines:", len(results[-1]))
