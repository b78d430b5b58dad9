import re
import warnings
from bs4 import BeautifulSoup, Tag, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

SIGNED_INT = re.compile(r'[+-]\d+')

def filter_entities(text):
	if text is None:
		return ""
	text = text.replace("\u00e2\u0080\u0093", "\u2013")
	text = text.replace("\u00e2\u0080\u0094", "\u2014")
	text = text.replace("\u00e2\u0080\u0099", "\u2019")
	text = text.replace("\u00c2\u00a0", " ")
	text = text.replace("&amp;", "&")
	text = text.replace("\u00a0", " ")
	# Modifiers are written with dashes on the page
	text = text.replace("\u2013", "-")
	text = text.replace("\u2014", "-")
	text = text.replace("\u2212", "-")
	text = ' '.join([part.strip() for part in text.split("\n")])
	return text

def collapse_spaces(text):
	return re.sub(r'\s+', ' ', text).strip()

def split_list(text, split=","):
	return [p.strip() for p in text.split(split) if p.strip() != ""]

def log_element(fn):
	def log_e(element):
		with open(fn, "a+") as fp:
			fp.write(str(element))
			fp.write("\n")
	return log_e

def strip_markup(text):
	bs = BeautifulSoup(text, 'html.parser')
	for br in bs.find_all('br'):
		br.replace_with(" ")
	return collapse_spaces(''.join([str(s) for s in bs.strings]))

def is_tag_named(element, taglist):
	if type(element) != Tag:
		return False
	elif element.name in taglist:
		return True
	return False

def has_class_fragment(element, fragment):
	if type(element) != Tag or not element.has_attr('class'):
		return False
	for c in element['class']:
		if fragment in c:
			return True
	return False

def get_text(detail):
	return ''.join(detail.find_all(string=True))

def split_maintain_parens(text, split, parenleft="(", parenright=")"):
	parts = text.split(split)
	newparts = []
	while len(parts) > 0:
		part = parts.pop(0)
		# Unclosed parens swallow the following parts until closed
		while parts and part.rfind(parenright) < part.rfind(parenleft):
			part = part + split + parts.pop(0)
		newparts.append(part)
	return [p.strip() for p in newparts if p.strip() != ""]
