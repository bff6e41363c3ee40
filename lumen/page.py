# page.py
# Single-page chat UI, rendered with render_template_string.
# Context: agent_name, default_suggestions.

HTML = """
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<meta name="description" content="A friendly web agent ready to chat with you.">
<title>Conversational Agent</title>
<style>
:root{--bg:#0b0b0b;--card:#0f0f0f;--muted:#9b9b9b;--accent:#ffd166;}
html,body{height:100%;margin:0;font-family:Inter,Segoe UI,system-ui,Arial;color:#eee;background:linear-gradient(180deg,#000,#0b0b0b);}
.page{max-width:760px;margin:20px auto;padding:18px;}
.chat-shell{background:var(--card);border-radius:12px;padding:18px;min-height:80vh;display:flex;flex-direction:column;}
.chat-header h1{margin:0;font-size:22px;}
.chat-header p{margin:4px 0 0;font-size:13px;color:var(--muted);}
.chat-feed{flex:1;overflow:auto;padding-top:12px;display:flex;flex-direction:column;gap:10px;max-height:62vh;}
.bubble{max-width:78%;padding:12px;border-radius:10px;}
.bubble p{margin:4px 0 0;white-space:pre-wrap;}
.bubble.user{align-self:flex-end;background:#121212;border:1px solid rgba(255,255,255,0.03);}
.bubble.assistant{align-self:flex-start;background:#0b1220;border-left:4px solid var(--accent);padding-left:10px;}
.role-label{font-size:12px;color:var(--muted);}
.message-form{display:flex;gap:8px;margin-top:12px;}
.message-form input{flex:1;padding:12px;border-radius:10px;border:1px solid rgba(255,255,255,0.04);background:#060606;color:#fff;}
button{background:#fff;color:#000;padding:10px 14px;border-radius:10px;border:none;cursor:pointer;transition:all .18s;}
button:hover:enabled{transform:translateY(-2px);box-shadow:0 6px 22px rgba(0,0,0,0.6);}
button:disabled{opacity:.5;cursor:default;}
.suggestions{display:flex;flex-wrap:wrap;gap:8px;margin-top:12px;}
.suggestions button{background:transparent;color:#fff;border:1px solid rgba(255,255,255,0.2);font-size:13px;}
</style>
</head>
<body>
<main class="page">
  <section class="chat-shell">
    <header class="chat-header">
      <h1>{{ agent_name }}</h1>
      <p>Your conversational accelerant for ideas, planning, and encouragement.</p>
    </header>

    <div class="chat-feed" id="feed"></div>

    <footer class="chat-footer">
      <form id="messageForm" class="message-form">
        <input id="messageInput" placeholder="Say something to your agent..." aria-label="Message input" autocomplete="off" />
        <button id="sendBtn" type="submit" disabled>Send</button>
      </form>
      <div class="suggestions" id="suggestions"></div>
    </footer>
  </section>
</main>

<script>
const AGENT_NAME = {{ agent_name|tojson }};
const DEFAULT_SUGGESTIONS = {{ default_suggestions|tojson }};
const GLITCH = "Hmm, something glitched on my end. Mind trying that again in a moment?";

const feedEl = document.getElementById('feed');
const form = document.getElementById('messageForm');
const input = document.getElementById('messageInput');
const sendBtn = document.getElementById('sendBtn');
const suggestionsEl = document.getElementById('suggestions');

let messages = [];
let suggestions = DEFAULT_SUGGESTIONS;
let isLoading = false;

/* Append a message to the conversation and the feed */
function addMessage(role, content){
  messages = messages.concat([{role: role, content: content, timestamp: Date.now()}]);
  const bubble = document.createElement('article');
  bubble.className = 'bubble ' + role;
  const label = document.createElement('span');
  label.className = 'role-label';
  label.textContent = role === 'assistant' ? AGENT_NAME : 'You';
  const body = document.createElement('p');
  body.textContent = content;
  bubble.appendChild(label);
  bubble.appendChild(body);
  feedEl.appendChild(bubble);
  bubble.scrollIntoView({behavior: 'smooth'});
}

function renderSuggestions(){
  suggestionsEl.innerHTML = '';
  for(const s of suggestions){
    const b = document.createElement('button');
    b.type = 'button';
    b.textContent = s;
    b.disabled = isLoading;
    b.addEventListener('click', ()=> sendMessage(s));
    suggestionsEl.appendChild(b);
  }
}

function setLoading(loading){
  isLoading = loading;
  input.disabled = loading;
  sendBtn.textContent = loading ? 'Thinking...' : 'Send';
  sendBtn.disabled = loading || !input.value.trim();
  renderSuggestions();
}

/* Post the full history to the server */
async function sendMessage(text){
  const trimmed = (text || '').trim();
  if(!trimmed || isLoading) return;

  addMessage('user', trimmed);
  input.value = '';
  setLoading(true);

  try {
    const res = await fetch('/api/chat', {
      method: 'POST',
      headers: {'Content-Type': 'application/json'},
      body: JSON.stringify({messages: messages.map(m => ({role: m.role, content: m.content}))})
    });
    if(!res.ok) throw new Error('Request failed with status ' + res.status);
    const data = await res.json();
    addMessage('assistant', data.reply);
    suggestions = (data.suggestions && data.suggestions.length) ? data.suggestions : DEFAULT_SUGGESTIONS;
  } catch(err){
    console.error(err);
    addMessage('assistant', GLITCH);
    suggestions = DEFAULT_SUGGESTIONS;
  } finally {
    setLoading(false);
    input.focus();
  }
}

form.addEventListener('submit', (e)=>{ e.preventDefault(); sendMessage(input.value); });
input.addEventListener('input', ()=>{ sendBtn.disabled = isLoading || !input.value.trim(); });

addMessage('assistant', "Hey there! I'm " + AGENT_NAME + ", your upbeat companion. Tell me what's on your mind and let's make progress together.");
renderSuggestions();
</script>
</body>
</html>
"""
